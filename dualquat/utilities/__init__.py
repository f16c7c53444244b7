"""
This package provides the configuration utilities used by dualquat.
"""
