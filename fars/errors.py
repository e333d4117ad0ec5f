"""
Exceptions raised by the FARS analysis functions
"""


class InvalidStateError(ValueError):
    """Requested STATE code does not occur in the loaded year's data"""

    def __init__(self, state):
        self.state = state
        super().__init__(f'invalid STATE number: {state}')
