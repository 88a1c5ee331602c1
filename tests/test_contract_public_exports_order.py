import unittest


class TestPublicExportsOrderContract(unittest.TestCase):
    def test_public_exports_are_sorted_and_consistent(self):
        import tracc
        import tracc.api as api

        self.assertIsInstance(api._PUBLIC_EXPORTS, tuple)

        seen = set()
        for name in api._PUBLIC_EXPORTS:
            self.assertNotIn(name, seen, f"Duplicate in _PUBLIC_EXPORTS: {name}")
            seen.add(name)

        self.assertEqual(list(api._PUBLIC_EXPORTS), sorted(api._PUBLIC_EXPORTS))

        # Every declared export is defined, and the package re-exports all of them.
        self.assertEqual(api.__all__, list(api._PUBLIC_EXPORTS))
        self.assertEqual(tracc.__all__, api.__all__)
        for name in api.__all__:
            self.assertTrue(hasattr(tracc, name), name)


if __name__ == "__main__":
    raise SystemExit(unittest.main())
