"""Color & style helpers.

Decisions:
- Each TaskCategory maps to one display color (work blue, home green,
  personal orange); completed tasks render dimmed gray.
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Supports palette overrides via environment or project .env file.
"""
from __future__ import annotations
import logging
import os, sys
from pathlib import Path
from quickreminder.models import TaskCategory

logger = logging.getLogger(__name__)

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

def _code(part: str) -> str:
    """Generate ANSI escape code for a given style part."""
    return f"\033[{part}m" if _ENABLE else ''

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    """Convert a hex color code to an RGB tuple."""
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _is_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)

def _fg_truecolor(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"

def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    idx = 16 + 36 * r6 + 6 * g6 + b6
    return f"\033[38;5;{idx}m"

def _from_hex(hex_code: str) -> str:
    """Convert a hex color code to an ANSI escape sequence."""
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return _fg_truecolor(r, g, b)
    return _fg_256(r, g, b)

RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')
STRIKE = _code('9')

HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_WORK_DEFAULT = '#3B82F6'
HEX_HOME_DEFAULT = '#22C55E'
HEX_PERSONAL_DEFAULT = '#F97316'
HEX_DONE_DEFAULT = '#9CA3AF'

ENV_KEYS = ('QUICKREMINDER_PRIMARY', 'QUICKREMINDER_WORK', 'QUICKREMINDER_HOME',
            'QUICKREMINDER_PERSONAL', 'QUICKREMINDER_DONE')
ENV_FILE = Path(__file__).resolve().parents[2] / '.env'


def load_env_overrides(path: Path = ENV_FILE) -> dict[str, str]:
    """Read palette overrides from a .env file; invalid hex values are skipped."""
    overrides: dict[str, str] = {}
    if not path.exists():
        return overrides
    try:
        text = path.read_text()
    except OSError as exc:
        logger.warning("could not read %s: %s", path, exc)
        return overrides
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        v = v.strip().strip('"\'')
        if k in ENV_KEYS and _is_hex(v):
            overrides[k] = '#' + v.lstrip('#')
    return overrides


def resolve_hex(key: str, default: str, overrides: dict[str, str]) -> str:
    """Priority: real env var > .env override > default."""
    env_value = os.environ.get(key)
    if env_value and _is_hex(env_value):
        return '#' + env_value.lstrip('#')
    return overrides.get(key, default)


_ENV_OVERRIDES = load_env_overrides()

HEX_PRIMARY = resolve_hex('QUICKREMINDER_PRIMARY', HEX_PRIMARY_DEFAULT, _ENV_OVERRIDES)
HEX_WORK = resolve_hex('QUICKREMINDER_WORK', HEX_WORK_DEFAULT, _ENV_OVERRIDES)
HEX_HOME = resolve_hex('QUICKREMINDER_HOME', HEX_HOME_DEFAULT, _ENV_OVERRIDES)
HEX_PERSONAL = resolve_hex('QUICKREMINDER_PERSONAL', HEX_PERSONAL_DEFAULT, _ENV_OVERRIDES)
HEX_DONE = resolve_hex('QUICKREMINDER_DONE', HEX_DONE_DEFAULT, _ENV_OVERRIDES)

PRIMARY = _from_hex(HEX_PRIMARY)
C_DONE = _from_hex(HEX_DONE)

CATEGORY_HEX = {
    TaskCategory.WORK: HEX_WORK,
    TaskCategory.HOME: HEX_HOME,
    TaskCategory.PERSONAL: HEX_PERSONAL,
}
CATEGORY_COLOR = {cat: _from_hex(h) for cat, h in CATEGORY_HEX.items()}

HEADER_COLOR = PRIMARY
ID_COLOR = PRIMARY + BOLD
EMPTY_COLOR = DIM + PRIMARY
DONE_COLOR = C_DONE + STRIKE

BAR_FILL = '█'
BAR_EMPTY = '░'


def category_color(category: TaskCategory) -> str:
    return CATEGORY_COLOR[category]

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

def progress_bar(rate: float, width: int = 20) -> str:
    """Render a fixed-width bar; rate is clamped to [0, 1]."""
    rate = min(1.0, max(0.0, rate))
    filled = int(round(rate * width))
    return BAR_FILL * filled + BAR_EMPTY * (width - filled)

__all__ = [
    'color','progress_bar','category_color','RESET','BOLD','DIM','STRIKE',
    'CATEGORY_COLOR','CATEGORY_HEX','HEADER_COLOR','ID_COLOR','EMPTY_COLOR','DONE_COLOR',
    'HEX_PRIMARY','HEX_WORK','HEX_HOME','HEX_PERSONAL','HEX_DONE',
    'load_env_overrides','resolve_hex','_ENABLE','_USE_TRUECOLOR','_FORCE'
]
