"""Draggable piece board: hit-testing, drag tracking and redraw."""
