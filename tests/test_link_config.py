import unittest
from unittest.mock import MagicMock, patch
from linkconfig.errors import MalformedInputError, ToolExitError
from linkconfig.library import Flavor
from linkconfig import link_config as link_config_module
from linkconfig.link_config import default_query, link_config, resolve, resolve_libraries
from linkconfig.pkg_config import QueryResult

def _fake_query(results=None, failures=None):
    results = results or {}
    failures = failures or {}
    query = MagicMock()
    query.search_directories.return_value = []

    def _query(package, flavor):
        if flavor in failures:
            raise failures[flavor]
        return results.get(flavor, QueryResult(["z"], []))
    query.query.side_effect = _query
    return query

class TestResolve(unittest.TestCase):

    def test_both_flavors_queried_by_default(self):
        query = _fake_query()
        blocks = resolve("zlib", ["favor_static", "system_static"], query=query)
        self.assertEqual(len(blocks), 2)
        flavors = [c[0][1] for c in query.query.call_args_list]
        self.assertEqual(flavors, [Flavor.DYNAMIC, Flavor.STATIC])

    def test_only_static_skips_dynamic_query(self):
        query = _fake_query()
        dylib_info, static_info, _ = resolve_libraries("zlib", ["only_static"], query=query)
        self.assertIsNone(dylib_info)
        self.assertIsNotNone(static_info)
        query.query.assert_called_once_with("zlib", Flavor.STATIC)

    def test_only_dylib_skips_static_query(self):
        query = _fake_query()
        dylib_info, static_info, _ = resolve_libraries("zlib", ["only_dylib"], query=query)
        self.assertIsNone(static_info)
        query.query.assert_called_once_with("zlib", Flavor.DYNAMIC)
        query.search_directories.assert_not_called()

    def test_dependency_order_follows_tool_output(self):
        query = _fake_query({Flavor.STATIC: QueryResult(["c", "a", "b"], [])})
        _, static_info, _ = resolve_libraries("pkg", [], query=query)
        self.assertEqual([d.name for d in static_info.dependencies], ["c", "a", "b"])

    def test_failure_propagates(self):
        query = _fake_query(failures={Flavor.STATIC: ToolExitError("pkg-config", 1, "", "boom")})
        with self.assertRaises(ToolExitError):
            resolve("zlib", [], query=query)

class TestLinkConfig(unittest.TestCase):

    @patch('linkconfig.link_config.logger')
    def test_one_flavor_failing_emits_nothing(self, mock_logger):
        error = ToolExitError("pkg-config", 1, "", "Package zlib was not found\n")
        query = _fake_query(failures={Flavor.STATIC: error})
        resolution = link_config("zlib", [], query=query)
        self.assertEqual(resolution.blocks, [])
        self.assertEqual(resolution.errors, [error])
        self.assertFalse(resolution.ok)
        mock_logger.error.assert_called_once()

    @patch('linkconfig.link_config.logger')
    def test_malformed_input_gives_placeholder(self, mock_logger):
        resolution = link_config(["zlib"], [], query=_fake_query())
        self.assertEqual(resolution.blocks, [])
        self.assertIsInstance(resolution.errors[0], MalformedInputError)

    @patch('linkconfig.modifiers.logger')
    def test_unknown_modifier_still_resolves(self, mock_logger):
        resolution = link_config("zlib", ["nope"], query=_fake_query())
        self.assertEqual(len(resolution.blocks), 2)
        self.assertEqual(len(resolution.errors), 1)
        self.assertTrue(resolution.ok)
        self.assertEqual(resolution.to_dict()["errors"], ["unknown modifier: `nope`"])

class TestDefaultQuery(unittest.TestCase):

    def setUp(self):
        link_config_module._default_query = None

    def tearDown(self):
        link_config_module._default_query = None

    @patch('linkconfig.link_config.PkgConfig')
    def test_created_once_across_calls(self, mock_pkg_config):
        mock_pkg_config.return_value = _fake_query()
        resolve("zlib", [])
        resolve("libpng", ["only_dylib"])

        mock_pkg_config.assert_called_once()
        self.assertIs(default_query(), mock_pkg_config.return_value)
        self.assertEqual(mock_pkg_config.return_value.query.call_count, 3)

    def test_explicit_query_bypasses_default(self):
        query = _fake_query()
        resolve("zlib", [], query=query)
        self.assertIsNone(link_config_module._default_query)

if __name__ == "__main__":
    unittest.main()
