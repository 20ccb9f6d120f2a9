import json
import pytest
from math_notation.symbols import INLINE_SYMBOLS, InlineSymbol, load_symbol_table, resolve_symbol


class TestInlineSymbols:

    def test_known_symbols(self):
        """Test lookups from the packaged table."""
        assert resolve_symbol('alpha') == InlineSymbol(markup='\\alpha', display='α')
        assert resolve_symbol('sigma_lower') == InlineSymbol(markup='\\sigma', display='σ')
        assert resolve_symbol('Omega').display == 'Ω'
        assert resolve_symbol('leq').markup == '\\leq'
        assert resolve_symbol('Rightarrow') == InlineSymbol(markup='\\Rightarrow', display='⇒')

    def test_editor_symbols(self):
        """Test identifiers inserted by the command palette."""
        assert resolve_symbol('integral').display == '∫'
        assert resolve_symbol('sigma').display == 'Σ'
        assert resolve_symbol('sqrt').display == '√'

    def test_lookup_miss_returns_identifier(self):
        """Test the degraded fallback."""
        symbol = resolve_symbol('does-not-exist')
        assert symbol.markup == 'does-not-exist'
        assert symbol.display == 'does-not-exist'

    def test_table_is_read_only(self):
        """Test that the table cannot be mutated."""
        with pytest.raises(TypeError):
            INLINE_SYMBOLS['alpha'] = InlineSymbol('a', 'a')

    def test_table_size(self):
        """Test that every category was flattened into the table."""
        assert len(INLINE_SYMBOLS) >= 50
        assert 'in_set' in INLINE_SYMBOLS

    def test_load_from_yaml(self, temp_dir):
        """Test loading a custom YAML table."""
        path = temp_dir / 'symbols.yaml'
        path.write_text("custom:\n  hbar: {markup: '\\hbar', display: 'ħ'}\n", encoding='utf-8')

        table = load_symbol_table(path)
        assert resolve_symbol('hbar', table) == InlineSymbol(markup='\\hbar', display='ħ')
        assert resolve_symbol('alpha', table) == InlineSymbol(markup='alpha', display='alpha')

    def test_load_from_json(self, temp_dir):
        """Test loading a custom JSON table."""
        path = temp_dir / 'symbols.json'
        path.write_text(json.dumps({'custom': {'ell': {'markup': '\\ell', 'display': 'ℓ'}}}), encoding='utf-8')

        assert load_symbol_table(path)['ell'].markup == '\\ell'

    def test_missing_file_falls_back_to_defaults(self, temp_dir):
        """Test fallback when the file cannot be read."""
        table = load_symbol_table(temp_dir / 'missing.yaml')
        assert table['alpha'] == INLINE_SYMBOLS['alpha']
