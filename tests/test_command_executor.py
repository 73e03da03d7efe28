import unittest
from unittest.mock import MagicMock, patch
from linkconfig.utils.command_executor import run_shell_command

class TestRunShellCommand(unittest.TestCase):

    @patch('linkconfig.utils.command_executor.subprocess.run')
    def test_captures_output_with_env(self, mock_run):
        mock_run.return_value = MagicMock(stdout="-lz\n", stderr="", returncode=0)
        result = run_shell_command(["pkg-config", "zlib", "--libs"], env={"PKG_CONFIG_PATH": "/opt/pc"})

        self.assertEqual(result, ("-lz\n", "", 0))
        mock_run.assert_called_once_with(
            ["pkg-config", "zlib", "--libs"],
            capture_output=True,
            text=True,
            env={"PKG_CONFIG_PATH": "/opt/pc"},
            check=False,
        )

    def test_only_command_and_env_accepted(self):
        with self.assertRaises(TypeError):
            run_shell_command(["pkg-config"], cwd="/tmp")

if __name__ == "__main__":
    unittest.main()
