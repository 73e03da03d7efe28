class LinkConfigError(Exception):
    """Base class for every error raised while resolving linkage."""


class ModifierError(LinkConfigError):
    """An unrecognized modifier. Recoverable: parsing carries on."""

    def __init__(self, modifier):
        self.modifier = modifier
        super().__init__(f"unknown modifier: `{modifier}`")


class MalformedInputError(LinkConfigError):
    """The package name or modifier list is not what was expected."""


class ToolLaunchError(LinkConfigError):
    def __init__(self, tool, reason):
        self.tool = tool
        self.reason = reason
        super().__init__(f"could not run {tool}: {reason}")


class ToolExitError(LinkConfigError):
    """The metadata tool ran but exited with a non-zero status."""

    def __init__(self, tool, returncode, stdout="", stderr=""):
        self.tool = tool
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        msg = f"{tool} did not exit successfully: exit status {returncode}"
        if stdout:
            msg += "\n--- stdout\n" + stdout
        if stderr:
            msg += "\n--- stderr\n" + stderr
        super().__init__(msg)
