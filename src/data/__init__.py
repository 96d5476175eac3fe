"""Pool persistence, price feeds and parameter presets."""
