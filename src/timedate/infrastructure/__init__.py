"""Infrastructure layer: ambient capabilities (clock, environment) and the runtime."""
