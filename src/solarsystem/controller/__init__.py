"""
The CONTROLLER layer builds the scene graph and drives its animation.
It talks to VTK through PyVista but never to Qt widgets directly.
"""
