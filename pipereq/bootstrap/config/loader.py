import os
from pathlib import Path

CONFIG_ENV = "PIPEREQCONFIG"
DEFAULT_CONFIGFILE = "pipereq.yaml"


def get_configfile() -> Path | None:
    """
    Resolve the YAML configuration file.

    Priority: PIPEREQCONFIG env > 'pipereq.yaml' in the current working directory.
    An explicitly configured file must exist, the default one is optional.
    """
    raw = os.getenv(CONFIG_ENV)

    if raw is None:
        file = Path.cwd() / DEFAULT_CONFIGFILE
        return file if file.is_file() else None

    file = Path(raw).expanduser()
    if not file.is_file():
        raise SystemExit(
            f"[config] Configuration file not found: '{file}'.\n"
            f"  - Fix or unset the {CONFIG_ENV} environment variable\n"
            f"  - Or place a '{DEFAULT_CONFIGFILE}' file in the current working directory."
        )

    return file
