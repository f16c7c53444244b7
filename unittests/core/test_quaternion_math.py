from unittest import TestCase

import numpy as np

from dualquat import core


class TestQuaternionConjugate(TestCase):

    def test_quaternion_conjugate(self):

        qconj = core.quaternion_conjugate([1, 2, 3, 4])

        np.testing.assert_array_equal(qconj, [-1, -2, -3, 4])

        qconj = core.quaternion_conjugate([[1, 2], [2, 3], [3, 4], [4, 5]])

        np.testing.assert_array_equal(qconj.T, [[-1, -2, -3, 4], [-2, -3, -4, 5]])

        # no normalization is applied
        quat = np.array([0.0, 0, 3, 4])

        np.testing.assert_array_equal(core.quaternion_conjugate(quat), [0, 0, -3, 4])

        # the input is not modified
        np.testing.assert_array_equal(quat, [0, 0, 3, 4])

        with self.assertRaises(ValueError):
            core.quaternion_conjugate([1, 2, 3])


class TestQuaternionMultiplication(TestCase):

    def test_quaternion_multiplication(self):

        quat_1 = [1, 0, 0, 0]
        quat_2 = [0, 1, 0, 0]

        qm = core.quaternion_multiplication(quat_1, quat_2)

        np.testing.assert_array_equal(qm, [0, 0, 1, 0])

        quat_1 = [[1], [0], [0], [0]]
        quat_2 = [[0], [1], [0], [0]]

        qm = core.quaternion_multiplication(quat_1, quat_2)

        np.testing.assert_array_equal(np.abs(qm), [[0], [0], [1], [0]])

        quat_1 = [[1, 0], [0, 1], [0, 0], [0, 0]]
        quat_2 = [[0, 0], [1, 1], [0, 0], [0, 0]]

        qm = core.quaternion_multiplication(quat_1, quat_2)

        np.testing.assert_array_equal(np.abs(qm), [[0, 0], [0, 0], [1, 0], [0, 1]])

        quat_1 = [np.sqrt(2)/2, 0, 0, np.sqrt(2)/2]  # x=x, y=z, z=-y
        quat_2 = [0, np.sqrt(2)/2, 0, np.sqrt(2)/2]  # x=-z, y=y, z=x

        qm = core.quaternion_multiplication(quat_1, quat_2)

        np.testing.assert_array_almost_equal(np.abs(qm), [0.5, 0.5, 0.5, 0.5])

        quat_1 = [0.25532186, 0.51064372, 0.76596558, -0.29555113]

        quat_2 = [-0.43199286, -0.53999107, -0.64798929, -0.31922045]

        qm = core.quaternion_multiplication(quat_1, quat_2)

        # truth comes from matrix rotations
        np.testing.assert_array_almost_equal(qm, [0.12889493, -0.16885878, 0.02972499, 0.97672373])

    def test_non_commutative(self):

        qm1 = core.quaternion_multiplication([1, 0, 0, 0], [0, 1, 0, 0])
        qm2 = core.quaternion_multiplication([0, 1, 0, 0], [1, 0, 0, 0])

        np.testing.assert_array_equal(qm1, -qm2)

    def test_one_with_many(self):

        quat_2 = np.array([[1, 0], [0, 1], [0, 0], [0, 0.]])

        qm = core.quaternion_multiplication([1, 0, 0, 0], quat_2)

        self.assertEqual(qm.shape, (4, 2))

        np.testing.assert_array_equal(qm[:, 0], core.quaternion_multiplication([1, 0, 0, 0], quat_2[:, 0]))
        np.testing.assert_array_equal(qm[:, 1], core.quaternion_multiplication([1, 0, 0, 0], quat_2[:, 1]))


class TestQuaternionNormDot(TestCase):

    def test_quaternion_norm(self):

        self.assertAlmostEqual(core.quaternion_norm([1, 2, 3, 4]), np.sqrt(30))

        np.testing.assert_array_almost_equal(core.quaternion_norm([[3, 0], [4, 0], [0, 0], [0, 2]]), [5, 2])

    def test_quaternion_dot(self):

        self.assertEqual(core.quaternion_dot([1, 2, 3, 4], [4, 3, 2, 1]), 20)

        np.testing.assert_array_equal(core.quaternion_dot([[1, 0], [0, 0], [0, 0], [0, 1]],
                                                          [[2, 0], [0, 0], [0, 0], [0, 3]]), [2, 3])

    def test_quaternion_normalize(self):

        np.testing.assert_array_almost_equal(core.quaternion_normalize([1, 2, 3, 4]), np.array([1, 2, 3, 4])/np.sqrt(30))

        # the scalar is forced to be positive
        np.testing.assert_array_almost_equal(core.quaternion_normalize([0, 0, 2, -2]),
                                             [0, 0, -np.sqrt(2)/2, np.sqrt(2)/2])


class TestRotation(TestCase):

    def test_vector_rotation(self):

        # 90 degrees about x
        quat = [np.sqrt(2)/2, 0, 0, np.sqrt(2)/2]

        np.testing.assert_array_almost_equal(core.vector_rotation(quat, [0, 1, 0]), [0, 0, 1])
        np.testing.assert_array_almost_equal(core.vector_rotation(quat, [0, 0, 1]), [0, -1, 0])
        np.testing.assert_array_almost_equal(core.vector_rotation(quat, [1, 0, 0]), [1, 0, 0])

        np.testing.assert_array_almost_equal(core.vector_rotation(quat, [[0, 0], [1, 0], [0, 1]]),
                                             [[0, 0], [0, -1], [1, 0]])

    def test_vector_rotation_matches_sandwich(self):

        rng = np.random.default_rng(20)

        for _ in range(10):
            quat = rng.normal(size=4)
            vector = rng.normal(size=3)

            sandwich = core.quaternion_multiplication(core.quaternion_multiplication(quat,
                                                                                     core.pure_quaternion(vector)),
                                                      core.quaternion_conjugate(quat))

            np.testing.assert_allclose(core.vector_rotation(quat, vector), sandwich[:3], atol=1e-12)
            self.assertAlmostEqual(sandwich[-1], 0)

    def test_vector_rotation_matches_rotmat(self):

        quat = [0.25532186, 0.51064372, 0.76596558, -0.29555113]

        vectors = np.array([[1, 0, 0, 2], [0, 1, 0, -1], [0, 0, 1, 0.5]])

        np.testing.assert_array_almost_equal(core.vector_rotation(quat, vectors),
                                             core.quaternion_to_rotmat(quat) @ vectors)

    def test_frame_rotation(self):

        quat = [np.sqrt(2)/2, 0, 0, np.sqrt(2)/2]

        np.testing.assert_array_almost_equal(core.frame_rotation(quat, [0, 0, 1]), [0, 1, 0])

        vector = np.array([0.3, -2, 5])

        np.testing.assert_array_almost_equal(core.frame_rotation(quat, core.vector_rotation(quat, vector)), vector)


class TestQuaternionIntegration(TestCase):

    def test_quaternion_integration(self):

        np.testing.assert_array_equal(core.quaternion_integration([0, 0, 0], 0.1), [0, 0, 0, 1])

        np.testing.assert_array_almost_equal(core.quaternion_integration([0, 0, np.pi], 1), [0, 0, 1, 0])

        np.testing.assert_array_almost_equal(core.quaternion_integration([np.pi, 0, 0], 0.5),
                                             [np.sqrt(2)/2, 0, 0, np.sqrt(2)/2])

        np.testing.assert_array_almost_equal(core.quaternion_integration([1, 2, 3], 1),
                                             core.rotvec_to_quaternion([1, 2, 3]))


class TestConversions(TestCase):

    def test_quaternion_to_rotmat(self):

        rotmat = core.quaternion_to_rotmat([0, 0, 0, 1])

        np.testing.assert_array_almost_equal(rotmat, np.eye(3))

        rotmat = core.quaternion_to_rotmat([[0, 1], [0, 0], [0, 0], [1, 0]])

        np.testing.assert_array_almost_equal(rotmat, [np.eye(3), [[1, 0, 0], [0, -1, 0], [0, 0, -1]]])

        rotmat = core.quaternion_to_rotmat([0, 0, np.sqrt(2)/2, np.sqrt(2)/2])

        np.testing.assert_array_almost_equal(rotmat, [[0, -1, 0], [1, 0, 0], [0, 0, 1]])

    def test_rotvec_to_quaternion(self):

        q = core.rotvec_to_quaternion([0, 0, 0])

        np.testing.assert_array_almost_equal(q, [0, 0, 0, 1])

        q = core.rotvec_to_quaternion([[0], [0], [0]])

        np.testing.assert_array_almost_equal(q, [[0], [0], [0], [1]])

        q = core.rotvec_to_quaternion([1, 2, 3])

        np.testing.assert_array_almost_equal(q, [0.25532186,  0.51064372,  0.76596558, -0.29555113])

        q = core.rotvec_to_quaternion([[np.pi, 0, 1, 0],
                                       [0, 0, 2, 0],
                                       [0, 0, 3, 0]])

        np.testing.assert_array_almost_equal(q, [[1, 0, 0.25532186, 0],
                                                 [0, 0, 0.51064372, 0],
                                                 [0, 0, 0.76596558, 0],
                                                 [0, 1, -0.29555113, 1]])

    def test_rotmat_to_quaternion(self):

        q = core.rotmat_to_quaternion(np.eye(3))

        np.testing.assert_array_almost_equal(q, [0, 0, 0, 1])

        q = core.rotmat_to_quaternion([[0, 1, 0], [-1, 0, 0], [0, 0, 1]])

        np.testing.assert_array_almost_equal(q, [0, 0, -np.sqrt(2)/2, np.sqrt(2)/2])

        q = core.rotmat_to_quaternion([np.eye(3)]*2)

        np.testing.assert_array_almost_equal(q.T, [[0, 0, 0, 1]]*2)

        with self.assertRaises(ValueError):
            core.rotmat_to_quaternion([1, 2, 3])

    def test_skew(self):

        skew_mat = core.skew([1, 2, 3])

        np.testing.assert_array_equal(skew_mat, [[0, -3, 2], [3, 0, -1], [-2, 1, 0]])
