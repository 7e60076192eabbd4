from .theme import DEFAULT_TOKENS, ThemeTokens, hex_to_rgba, validate_theme_tokens

__all__ = ["DEFAULT_TOKENS", "ThemeTokens", "hex_to_rgba", "validate_theme_tokens"]
