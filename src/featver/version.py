"""Version management for featver."""

import re
from pathlib import Path

# Build-time version constant (injected during packaging)
__BUILD_VERSION__ = None


def get_version() -> str:
    """
    Get the current featver version.

    Uses the build-time constant when set, otherwise parses pyproject.toml
    from a source checkout.

    Returns:
        str: Version string, or "unknown"
    """
    if __BUILD_VERSION__:
        return __BUILD_VERSION__

    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    try:
        content = pyproject_path.read_text(encoding='utf-8')
    except OSError:
        return "unknown"

    match = re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE)
    if match and re.match(r'^\d+\.\d+\.\d+(a\d+|b\d+|rc\d+)?$', match.group(1)):
        return match.group(1)
    return "unknown"


__version__ = get_version()
