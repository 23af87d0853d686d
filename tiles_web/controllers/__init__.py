"""Component controllers for the bundled site."""
