"""Header and list formatting for Rust-like source."""
