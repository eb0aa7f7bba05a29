import sys


class InputReader:
    """Line-based input with retry-until-valid loops.

    Callers only ever see well-formed values. End of input raises EOFError
    from the underlying input function, which the entry point treats as quit.
    """

    def __init__(self, input_func=None, output=None):
        self.input_func = input_func if input_func is not None else input
        self.output = output if output is not None else sys.stdout

    def _prompt(self, text):
        if text:
            self.output.write(text)
            self.output.flush()

    def read_line(self, prompt=""):
        self._prompt(prompt)
        return self.input_func().strip()

    def read_string(self, prompt=""):
        """Read a non-empty, letters-only string."""
        self._prompt(prompt)
        while True:
            value = self.input_func().strip()
            if not value:
                self._prompt("Input cannot be empty. Please try again: ")
                continue
            if not value.isalpha():
                self._prompt("Name must contain only letters. Please try again: ")
                continue
            return value

    def read_int(self, prompt=""):
        self._prompt(prompt)
        while True:
            raw = self.input_func().strip()
            try:
                return int(raw)
            except ValueError:
                self._prompt("Invalid input. Please enter a number: ")

    def read_int_in_range(self, lo, hi, prompt=""):
        value = self.read_int(prompt)
        while value < lo or value > hi:
            value = self.read_int(f"Please enter a number between {lo} and {hi}: ")
        return value

    def wait_for_enter(self, prompt="\nPress Enter to continue..."):
        self._prompt(prompt)
        self.input_func()
