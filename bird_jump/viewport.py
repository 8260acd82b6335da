class Viewport:
    """Current drawable area. The host updates it on resize; everything else only reads it."""

    def __init__(self, width, height):
        self.width = width
        self.height = height

    @property
    def size(self):
        return (self.width, self.height)

    def __repr__(self):
        return f"Viewport({self.width}x{self.height})"
