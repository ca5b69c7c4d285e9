"""Back office API for a rental building."""
