"""Environment access and property resolution."""
