"""Application composition layer for the Tkinter GUI.

``main`` wires views, view models, the animation presenter and the settings
store into a runnable window without placing transform logic in views.
"""
