"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(DB wiring, error kinds, input validation). Keep feature-specific SQL and
rendering in the corresponding feature package (e.g. `posts/`).
"""
