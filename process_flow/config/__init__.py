"""Network configuration: dataclasses, loaders and the network builder."""
