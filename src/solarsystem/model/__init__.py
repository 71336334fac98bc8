"""
The MODEL layer contains pure data structures.
It has NO knowledge of the GUI (Qt) or the Visualization (PyVista).
It describes the bodies of the scene and how fast they turn.
"""
