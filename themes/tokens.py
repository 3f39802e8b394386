"""
Design Token Lookups

Reads colors, spacing, breakpoints, typography and stacking layers out of
a nested theme map. Every lookup goes through deep_get, so a missing token
degrades to a default instead of aborting the caller. require_token and
media_query are the strict variants and raise TokenNotFoundError.

Theme layout:
    colors.<name>.<variant>         hex color string
    spacing.<step>                  CSS length
    breakpoints.<name>              CSS length
    typography.font-family.<role>   font stack
    typography.font-size.<name>     CSS length
    z-index.<layer>                 int
"""

import logging
from collections.abc import Mapping

from stylesheet_helpers import deep_get, deep_merge, MISSING

_logger = logging.getLogger(__name__)

REQUIRED_GROUPS = ('colors', 'spacing', 'breakpoints', 'typography')

DEFAULT_THEME = {
    'colors': {
        'primary': {'base': '#1d4ed8', 'light': '#60a5fa', 'dark': '#1e3a8a'},
        'neutral': {'base': '#6b7280', 'light': '#f3f4f6', 'dark': '#111827'},
        'danger': {'base': '#dc2626', 'light': '#fca5a5', 'dark': '#7f1d1d'},
        'success': {'base': '#16a34a', 'light': '#86efac', 'dark': '#14532d'},
    },
    'spacing': {
        '0': '0',
        '1': '0.25rem',
        '2': '0.5rem',
        '3': '0.75rem',
        '4': '1rem',
        '6': '1.5rem',
        '8': '2rem',
    },
    'breakpoints': {
        'sm': '640px',
        'md': '768px',
        'lg': '1024px',
        'xl': '1280px',
    },
    'typography': {
        'font-family': {
            'body': "'Inter', system-ui, sans-serif",
            'heading': "'Inter', system-ui, sans-serif",
            'mono': "'JetBrains Mono', monospace",
        },
        'font-size': {
            'sm': '0.875rem',
            'base': '1rem',
            'lg': '1.125rem',
            'xl': '1.25rem',
        },
        'line-height': {
            'tight': 1.25,
            'normal': 1.5,
        },
    },
    'z-index': {
        'dropdown': 1000,
        'sticky': 1020,
        'modal': 1050,
        'tooltip': 1070,
    },
}


class TokenNotFoundError(KeyError):
    """Raised by strict lookups when a token path does not resolve"""

    def __init__(self, keys):
        self.keys = tuple(keys)
        super().__init__(f"Theme token not found: {_dotted(self.keys)}")

    def __str__(self):
        return self.args[0]


def _dotted(keys):
    return '.'.join(str(k) for k in keys)


def token(theme, *keys, default=None):
    """
    Look up a design token by key path

    Args:
        theme: Theme map
        *keys: Key path into the theme
        default: Value returned if the token is missing

    Returns:
        Token value or default
    """
    value = deep_get(theme, *keys, default=MISSING)
    if value is MISSING:
        _logger.debug("Theme token %s not found, using default", _dotted(keys))
        return default
    return value


def require_token(theme, *keys):
    """
    Look up a design token that must exist

    Raises:
        TokenNotFoundError: If any key in the path is missing
    """
    value = deep_get(theme, *keys, default=MISSING)
    if value is MISSING:
        _logger.warning("Required theme token %s is missing", _dotted(keys))
        raise TokenNotFoundError(keys)
    return value


def color(theme, name, variant='base', default=None):
    """
    Color value for a palette entry

    Example:
        color(theme, 'primary', 'dark')  # '#1e3a8a'
    """
    return token(theme, 'colors', name, variant, default=default)


def spacing(theme, step, default=None):
    """Spacing length for a scale step; integer steps are accepted"""
    return token(theme, 'spacing', str(step), default=default)


def breakpoint(theme, name, default=None):
    return token(theme, 'breakpoints', name, default=default)


def media_query(theme, name):
    """
    Min-width media query for a named breakpoint

    Returns:
        str: e.g. '@media (min-width: 768px)'

    Raises:
        TokenNotFoundError: If the breakpoint is not defined
    """
    width = require_token(theme, 'breakpoints', name)
    return f"@media (min-width: {width})"


def z_index(theme, layer, default=None):
    return token(theme, 'z-index', layer, default=default)


def font(theme, role='body', default=None):
    """Font stack for a typography role (body, heading, mono)"""
    return token(theme, 'typography', 'font-family', role, default=default)


def with_overrides(theme, overrides):
    """
    Theme with overrides merged on top

    Only the keys present in overrides change; sibling tokens of an
    overridden token are kept.
    """
    return deep_merge(theme, overrides)


def validate_theme(theme):
    """
    Validate a theme has the groups style-sheet code expects

    Args:
        theme: Theme map to validate

    Returns:
        dict: Validation results and any issues found
    """
    issues = []

    if not isinstance(theme, Mapping):
        issues.append(
            f"CRITICAL: Theme must be a mapping, got {type(theme).__name__}"
        )
    else:
        for group in REQUIRED_GROUPS:
            value = deep_get(theme, group, default=MISSING)
            if value is MISSING:
                issues.append(f"CRITICAL: Missing required group: {group}")
            elif not isinstance(value, Mapping):
                issues.append(f"CRITICAL: Group '{group}' is not a mapping")
            elif not value:
                issues.append(f"WARNING: Group '{group}' is empty")

    critical_issues = [i for i in issues if i.startswith('CRITICAL')]

    return {
        'valid': len(critical_issues) == 0,
        'issues': issues,
        'has_critical_issues': len(critical_issues) > 0
    }
