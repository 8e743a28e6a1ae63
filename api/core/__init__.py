"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(DB wiring, settings, logging, the generic table repository). Keep
feature-specific columns and queries in the corresponding feature package
(e.g. `projects/`).
"""
