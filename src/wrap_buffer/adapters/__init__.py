"""Host adapters that drive the buffer from a terminal UI."""
