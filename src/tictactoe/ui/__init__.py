"""Terminal front end: keyboard input and rendering."""
