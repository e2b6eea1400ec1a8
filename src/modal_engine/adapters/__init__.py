"""Host adapters for the modal engine."""
