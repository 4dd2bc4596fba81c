"""Generate typed TypeScript ABI modules from JSON ABI descriptions."""
