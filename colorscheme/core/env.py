"""Environment configuration for colorscheme.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables supply defaults for the CLI flags:
  COLORSCHEME_THRESHOLD, COLORSCHEME_MIN_BRIGHT, COLORSCHEME_MAX_BRIGHT,
  COLORSCHEME_TERM, COLORSCHEME_DEBUG
"""

import os
from pathlib import Path

from colorscheme.core.types import ConfigError

ENV_PREFIX = 'COLORSCHEME_'
_TRUE = {'1', 'true', 'yes', 'on'}


def _find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above start, not crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Quotes and a leading `export ` are stripped."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :]
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def env_str(name: str, default: str) -> str:
    return os.environ.get(ENV_PREFIX + name, default)


def env_int(name: str, default: int) -> int:
    """Integer from COLORSCHEME_<name>, or default when unset or blank."""
    raw = os.environ.get(ENV_PREFIX + name, '').strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f'{ENV_PREFIX}{name} must be an integer, got {raw!r}') from None


def env_flag(name: str) -> bool:
    return os.environ.get(ENV_PREFIX + name, '').strip().lower() in _TRUE
