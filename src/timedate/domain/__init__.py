"""Domain layer: zones, instants, and civil-time rendering.

Pure logic with no dependency on services, output, or adapters.
Ambient state (clock, environment) arrives through capabilities.
"""
