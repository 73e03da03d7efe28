import os
import shutil
import tempfile
import unittest
from linkconfig.search_paths import (FixedDirectories, StagedLibraryDirectories,
                                     augment_search_path, is_system_directory,
                                     prepare_environment)

class TestAugmentSearchPath(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.lib_dir = os.path.join(self.test_dir, "lib")
        os.makedirs(os.path.join(self.lib_dir, "pkgconfig"))

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_appends_directory_and_pkgconfig_subdir(self):
        value = augment_search_path("/opt/a", [self.lib_dir], separator=":")
        self.assertEqual(value, ":".join(["/opt/a", self.lib_dir, os.path.join(self.lib_dir, "pkgconfig")]))

    def test_empty_value(self):
        self.assertEqual(augment_search_path("", ["/nonexistent"], separator=":"), "/nonexistent")

    def test_idempotent(self):
        once = augment_search_path("/opt/a", [self.lib_dir])
        twice = augment_search_path(once, [self.lib_dir])
        self.assertEqual(once, twice)

    def test_prepare_environment_does_not_touch_base(self):
        base = {"PKG_CONFIG_PATH": "/opt/a"}
        env = prepare_environment(FixedDirectories(["/opt/b"]), "PKG_CONFIG_PATH", base)
        self.assertEqual(base, {"PKG_CONFIG_PATH": "/opt/a"})
        self.assertEqual(env["PKG_CONFIG_PATH"], os.pathsep.join(["/opt/a", "/opt/b"]))

    def test_prepare_environment_without_directories(self):
        env = prepare_environment(FixedDirectories([]), "PKG_CONFIG_PATH", {"HOME": "/root"})
        self.assertEqual(env, {"HOME": "/root"})

class TestStagedLibraryDirectories(unittest.TestCase):

    def setUp(self):
        self.root = tempfile.mkdtemp()
        os.makedirs(os.path.join(self.root, "arm64-v8a", "lib"))
        os.makedirs(os.path.join(self.root, "x86_64", "lib"))
        os.makedirs(os.path.join(self.root, "x86_64", "include"))

    def tearDown(self):
        shutil.rmtree(self.root)

    def test_lists_arch_lib_dirs(self):
        provider = StagedLibraryDirectories([self.root], environ={})
        self.assertEqual(provider.list_native_search_directories(), [
            self.root,
            os.path.join(self.root, "arm64-v8a", "lib"),
            os.path.join(self.root, "x86_64", "lib"),
        ])

    def test_missing_root_is_skipped(self):
        provider = StagedLibraryDirectories([os.path.join(self.root, "missing")], environ={})
        self.assertEqual(provider.list_native_search_directories(), [])

    def test_roots_from_environment(self):
        provider = StagedLibraryDirectories([], environ={"LINKCONFIG_NATIVE_DIRS": self.root})
        self.assertIn(os.path.join(self.root, "x86_64", "lib"), provider.list_native_search_directories())

class TestIsSystemDirectory(unittest.TestCase):

    def test_default_prefixes(self):
        self.assertTrue(is_system_directory("/usr/lib"))
        self.assertTrue(is_system_directory("/usr/local/lib/"))
        self.assertTrue(is_system_directory("/lib64"))
        self.assertFalse(is_system_directory("/opt/zlib/lib"))
        self.assertFalse(is_system_directory("/usrlocal/lib"))

    def test_custom_prefixes(self):
        self.assertTrue(is_system_directory("/sysroot/lib", ["/sysroot"]))
        self.assertFalse(is_system_directory("/usr/lib", ["/sysroot"]))

if __name__ == "__main__":
    unittest.main()
