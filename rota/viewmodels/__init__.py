"""ViewModel package for UI state and command surfaces.

Call context:
    ``rota/app/main.py`` and the animation presenter import concrete
    viewmodels from this package to bind view callbacks to state transitions.

Dependencies:
    Modules in this package depend on domain types only. Tk widgets and file
    I/O remain outside.

Responsibilities:
    - Hold the two card transforms and the selection.
    - Track animated rendering state per card.
    - Keep display settings typed and validated.
"""
