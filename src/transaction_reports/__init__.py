"""Transaction Reports API: monthly reports over seeded product transactions."""
