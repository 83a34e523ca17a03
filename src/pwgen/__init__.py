"""pwgen: random strings drawn from configurable symbol pools."""
