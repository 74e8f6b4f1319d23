"""Core abstractions: streams, the stream registry, devices and errors."""
