import builtins
from typing import List


class Console:
    """Standard input/output used by Read and Write statements."""

    def read_line(self, prompt: str = '') -> str:
        try:
            return builtins.input(prompt)
        except EOFError:
            return ''

    def write_line(self, text: str):
        print(text)


class BufferedConsole(Console):
    """Console fed from a list of input lines, collecting written lines.

    Used when a program is run from a string rather than a terminal.
    """
    def __init__(self, inputs: List[str] = None):
        self.inputs: List[str] = list(inputs or [])
        self.outputs: List[str] = []

    def read_line(self, prompt: str = '') -> str:
        if not self.inputs:
            return ''
        return self.inputs.pop(0)

    def write_line(self, text: str):
        self.outputs.append(text)
