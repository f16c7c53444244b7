from unittest import TestCase

import numpy as np

from dualquat import core


def random_dual_quaternion(rng: np.random.Generator, columns: int | None = None) -> core.DualQuaternion:
    shape = (4,) if columns is None else (4, columns)

    return core.DualQuaternion(rng.normal(size=shape), rng.normal(size=shape))


class TestDualQuaternionType(TestCase):

    def test_default(self):

        dq = core.DualQuaternion()

        np.testing.assert_array_equal(dq.primary, [0, 0, 0, 1])
        np.testing.assert_array_equal(dq.dual, [0, 0, 0, 0])

        self.assertEqual(dq, core.IDENTITY)
        self.assertEqual(core.identity(), core.IDENTITY)

    def test_dual_defaults_to_zeros(self):

        dq = core.DualQuaternion([[1, 0], [0, 1], [0, 0], [0, 0]])

        np.testing.assert_array_equal(dq.dual, np.zeros((4, 2)))

    def test_bad_shapes(self):

        with self.assertRaises(ValueError):
            core.DualQuaternion([1, 2, 3])

        with self.assertRaises(ValueError):
            core.DualQuaternion([0, 0, 0, 1], [0, 0, 0])

        with self.assertRaises(ValueError):
            core.DualQuaternion([0, 0, 0, 1], np.zeros((4, 2)))

        with self.assertRaises(ValueError):
            core.DualQuaternion.from_array([1, 2, 3, 4])

    def test_immutable(self):

        primary = np.array([0, 0, 0, 1.0])

        dq = core.DualQuaternion(primary)

        # the input is copied
        primary[0] = 5

        np.testing.assert_array_equal(dq.primary, [0, 0, 0, 1])

        with self.assertRaises(ValueError):
            dq.primary[0] = 5

        with self.assertRaises(ValueError):
            dq.dual[0] = 5

        with self.assertRaises(AttributeError):
            dq.primary = [1, 0, 0, 0]

    def test_array_round_trip(self):

        dq = core.DualQuaternion.from_array([1, 2, 3, 4, 5, 6, 7, 8])

        np.testing.assert_array_equal(dq.primary, [1, 2, 3, 4])
        np.testing.assert_array_equal(dq.dual, [5, 6, 7, 8])
        np.testing.assert_array_equal(dq.array, [1, 2, 3, 4, 5, 6, 7, 8])

        stacked = np.arange(16.).reshape(8, 2)

        dq = core.DualQuaternion.from_array(stacked)

        self.assertEqual(dq.primary.shape, (4, 2))
        np.testing.assert_array_equal(dq.array, stacked)

    def test_unpacking(self):

        primary, dual = core.DualQuaternion([1, 0, 0, 0], [0, 1, 0, 0])

        np.testing.assert_array_equal(primary, [1, 0, 0, 0])
        np.testing.assert_array_equal(dual, [0, 1, 0, 0])

    def test_equality(self):

        a = core.DualQuaternion([0, 0, 0, 1], [1, 2, 3, 0])
        b = core.DualQuaternion([0, 0, 0, 1], [1, 2, 3, 0])
        c = core.DualQuaternion([0, 0, 0, 1], [1, 2, 3 + 1e-12, 0])

        self.assertEqual(a, b)
        self.assertNotEqual(a, c)
        self.assertTrue(a.isclose(c))
        self.assertFalse(a.isclose(c, atol=1e-14))

        self.assertNotEqual(a, [0, 0, 0, 1, 1, 2, 3, 0])

        with self.assertRaises(TypeError):
            hash(a)

    def test_is_rigid_transform(self):

        self.assertTrue(core.IDENTITY.is_rigid_transform())

        # half of a translation of [2, 0, 0]
        self.assertTrue(core.DualQuaternion([0, 0, 0, 1], [1, 0, 0, 0]).is_rigid_transform())

        self.assertFalse(core.DualQuaternion([0, 0, 0, 2]).is_rigid_transform())

        # violates the study condition
        self.assertFalse(core.DualQuaternion([0, 0, 0, 1], [0, 0, 0, 1]).is_rigid_transform())

    def test_repr(self):

        self.assertTrue(repr(core.IDENTITY).startswith('DualQuaternion('))


class TestLinearAlgebra(TestCase):

    def setUp(self):

        self.a = core.DualQuaternion([1, 2, 3, 4], [5, 6, 7, 8])
        self.b = core.DualQuaternion([-1, 0, 1, 2], [0.5, 0, 0, 1])

    def test_add_sub(self):

        total = core.add(self.a, self.b)

        np.testing.assert_array_equal(total.primary, [0, 2, 4, 6])
        np.testing.assert_array_equal(total.dual, [5.5, 6, 7, 9])

        self.assertEqual(core.sub(total, self.b), self.a)

        self.assertEqual(self.a + self.b, total)
        self.assertEqual(total - self.b, self.a)

    def test_scale_negate(self):

        scaled = core.scale(2, self.a)

        np.testing.assert_array_equal(scaled.array, [2, 4, 6, 8, 10, 12, 14, 16])

        self.assertEqual(2 * self.a, scaled)
        self.assertEqual(self.a * 2, scaled)

        self.assertEqual(core.negate(self.a), core.scale(-1, self.a))
        self.assertEqual(-self.a, core.negate(self.a))

    def test_conjugates(self):

        conj = core.conj(self.a)

        np.testing.assert_array_equal(conj.primary, [-1, -2, -3, 4])
        np.testing.assert_array_equal(conj.dual, [-5, -6, -7, 8])

        conj_num = core.conj_dual_num(self.a)

        np.testing.assert_array_equal(conj_num.primary, [1, 2, 3, 4])
        np.testing.assert_array_equal(conj_num.dual, [-5, -6, -7, -8])

        self.assertEqual(core.conj(core.conj(self.a)), self.a)
        self.assertEqual(core.conj_dual_num(core.conj_dual_num(self.a)), self.a)

    def test_add_num_quat(self):

        res = core.add_num_quat(core.DualNumber(1, 2), self.a)

        np.testing.assert_array_equal(res.primary, [1, 2, 3, 5])
        np.testing.assert_array_equal(res.dual, [5, 6, 7, 10])

        # the input is untouched
        np.testing.assert_array_equal(self.a.primary, [1, 2, 3, 4])

    def test_mul_num_quat(self):

        res = core.mul_num_quat(core.DualNumber(2, 3), self.b)

        np.testing.assert_array_equal(res.primary, [-2, 0, 2, 4])
        np.testing.assert_array_equal(res.dual, [1 - 3, 0, 3, 2 + 6])

        # a dual number with zero dual part is the same as scaling
        self.assertEqual(core.mul_num_quat(core.DualNumber(2.0), self.a), core.scale(2, self.a))


class TestMultiplication(TestCase):

    def test_identity(self):

        rng = np.random.default_rng(0)

        for _ in range(5):
            a = random_dual_quaternion(rng)

            self.assertTrue(core.mul(a, core.IDENTITY).isclose(a))
            self.assertTrue(core.mul(core.IDENTITY, a).isclose(a))

    def test_known_product(self):

        # i + e j times j + e k
        a = core.DualQuaternion([1, 0, 0, 0], [0, 1, 0, 0])
        b = core.DualQuaternion([0, 1, 0, 0], [0, 0, 1, 0])

        res = core.mul(a, b)

        # primary: i j = k.  dual: i k + j j = -j - 1
        np.testing.assert_array_equal(res.primary, [0, 0, 1, 0])
        np.testing.assert_array_equal(res.dual, [0, -1, 0, -1])

        self.assertEqual(a * b, res)

    def test_associative_not_commutative(self):

        rng = np.random.default_rng(1)

        a, b, c = (random_dual_quaternion(rng) for _ in range(3))

        self.assertTrue(core.mul(core.mul(a, b), c).isclose(core.mul(a, core.mul(b, c))))

        self.assertFalse(core.mul(a, b).isclose(core.mul(b, a)))

    def test_distributive(self):

        rng = np.random.default_rng(2)

        a, b, c = (random_dual_quaternion(rng) for _ in range(3))

        self.assertTrue(core.mul(a, core.add(b, c)).isclose(core.add(core.mul(a, b), core.mul(a, c))))

    def test_vectorized(self):

        rng = np.random.default_rng(3)

        a = random_dual_quaternion(rng, 3)
        b = random_dual_quaternion(rng, 3)

        res = core.mul(a, b)

        self.assertEqual(res.primary.shape, (4, 3))

        for col in range(3):
            single = core.mul(core.DualQuaternion(a.primary[:, col], a.dual[:, col]),
                              core.DualQuaternion(b.primary[:, col], b.dual[:, col]))

            np.testing.assert_allclose(res.primary[:, col], single.primary)
            np.testing.assert_allclose(res.dual[:, col], single.dual)

        # a single dual quaternion applied to many
        res = core.mul(core.IDENTITY, b)

        self.assertTrue(res.isclose(b))

    def test_single_with_many(self):

        single = core.DualQuaternion([1, 2, 3, 4], [5, 6, 7, 8])

        # a batch of 4 columns would silently pair elements with columns if broadcast naively
        for columns in (4, 3):
            with self.subTest(columns=columns):
                res = core.add(single, core.DualQuaternion(np.zeros((4, columns))))

                self.assertEqual(res.primary.shape, (4, columns))

                for col in range(columns):
                    np.testing.assert_array_equal(res.primary[:, col], [1, 2, 3, 4])
                    np.testing.assert_array_equal(res.dual[:, col], [5, 6, 7, 8])

                rng = np.random.default_rng(columns)
                many = random_dual_quaternion(rng, columns)

                added = core.add(many, single)
                left = core.sub(single, many)
                right = core.sub(many, single)

                for col in range(columns):
                    column = core.DualQuaternion(many.primary[:, col], many.dual[:, col])

                    for res, expected in ((added, core.add(column, single)), (left, core.sub(single, column)),
                                          (right, core.sub(column, single))):
                        np.testing.assert_allclose(res.primary[:, col], expected.primary)
                        np.testing.assert_allclose(res.dual[:, col], expected.dual)

        factors = np.array([1.0, -2.0, 0.5, 3.0])

        scaled = core.scale(factors, single)

        self.assertEqual(scaled.primary.shape, (4, 4))

        for col, factor in enumerate(factors):
            np.testing.assert_array_equal(scaled.primary[:, col], factor * single.primary)
            np.testing.assert_array_equal(scaled.dual[:, col], factor * single.dual)

        number = core.DualNumber(np.array([2.0, 1.0, -1.0]), np.array([3.0, 0.0, 0.5]))

        products = core.mul_num_quat(number, single)
        sums = core.add_num_quat(number, single)

        self.assertEqual(products.primary.shape, (4, 3))
        self.assertEqual(sums.primary.shape, (4, 3))

        for col in range(3):
            column_number = core.DualNumber(number.real[col], number.dual[col])

            expected = core.mul_num_quat(column_number, single)

            np.testing.assert_allclose(products.primary[:, col], expected.primary)
            np.testing.assert_allclose(products.dual[:, col], expected.dual)

            expected = core.add_num_quat(column_number, single)

            np.testing.assert_allclose(sums.primary[:, col], expected.primary)
            np.testing.assert_allclose(sums.dual[:, col], expected.dual)

        # the single input is untouched
        np.testing.assert_array_equal(single.primary, [1, 2, 3, 4])
