"""
The APP layer is the PySide6 desktop front end.
It reads the controls, asks the engine for a result and hands it to the chart renderer.
"""
