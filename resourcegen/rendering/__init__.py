"""Template validation, rendering and output I/O."""
