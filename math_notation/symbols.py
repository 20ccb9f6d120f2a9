"""
Inline symbol table: symbol identifiers to (LaTeX markup, display glyph) pairs.
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, NamedTuple, Optional

import yaml


logger = logging.getLogger(__name__)

DEFAULT_SYMBOLS_PATH = Path(__file__).parent / "data" / "inline_symbols.yaml"


class InlineSymbol(NamedTuple):
    markup: str
    display: str


def _read_mapping_file(path: Path) -> dict:
    with open(path, 'r', encoding='utf-8') as f:
        if path.suffix in ['.yaml', '.yml']:
            return yaml.safe_load(f) or {}
        return json.load(f)


def _flatten(data: dict) -> Dict[str, InlineSymbol]:
    """Flatten ``{category: {id: {markup, display}}}`` into ``{id: InlineSymbol}``."""
    table = {}
    for category, entries in data.items():
        if not isinstance(entries, dict):
            logger.warning(f"Ignoring symbol category '{category}': expected a mapping")
            continue
        for symbol_id, entry in entries.items():
            markup = entry.get('markup', symbol_id)
            table[str(symbol_id)] = InlineSymbol(markup=markup, display=entry.get('display', markup))
    return table


def load_symbol_table(path: Optional[Path] = None) -> Mapping[str, InlineSymbol]:
    """Load a read-only symbol table from a YAML or JSON file.

    A missing or unreadable file falls back to the packaged defaults.
    """
    if path is not None:
        path = Path(path)
        try:
            table = _flatten(_read_mapping_file(path))
            logger.info(f"Loaded {len(table)} inline symbols from {path}")
            return MappingProxyType(table)
        except (OSError, ValueError, AttributeError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load inline symbols from {path}: {e}")

    return MappingProxyType(_flatten(_read_mapping_file(DEFAULT_SYMBOLS_PATH)))


INLINE_SYMBOLS: Mapping[str, InlineSymbol] = load_symbol_table()


def resolve_symbol(symbol_id: str, table: Optional[Mapping[str, InlineSymbol]] = None) -> InlineSymbol:
    """Look up an inline symbol.

    Unknown identifiers resolve to themselves for both markup and display so
    the renderer always has something to show.
    """
    table = INLINE_SYMBOLS if table is None else table
    symbol = table.get(symbol_id)
    if symbol is None:
        logger.debug(f"Unknown inline symbol: {symbol_id}")
        return InlineSymbol(markup=symbol_id, display=symbol_id)
    return symbol


__all__ = [
    'InlineSymbol',
    'INLINE_SYMBOLS',
    'DEFAULT_SYMBOLS_PATH',
    'load_symbol_table',
    'resolve_symbol'
]
