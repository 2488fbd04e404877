"""Host adapters translating UI toolkit events for the editor core."""
