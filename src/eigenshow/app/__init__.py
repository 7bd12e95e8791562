"""
The APP layer: the Qt store wrapping the session, the input router and the widgets.
"""
