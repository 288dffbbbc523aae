from typing import Optional

from rdeval.common import Location


class Cursor:
    """
    A read position over a fixed input string.

    The input string is never changed after construction and the position
    only moves forward. A cursor serves exactly one evaluation.

    Args:
    input_str(str): The expression text.
    ws(str): Characters skipped by :meth:`skip_ws`. If `None` no skipping is
        done and the input must not contain whitespace.
    file_name(str): Used in error reporting.
    """

    __slots__ = ['_input_str', 'position', 'ws', 'file_name']

    def __init__(self, input_str: str, ws: Optional[str] = None,
                 file_name: Optional[str] = None):
        self._input_str = input_str
        self.position = 0
        self.ws = ws
        self.file_name = file_name

    @property
    def input_str(self) -> str:
        return self._input_str

    def peek(self) -> Optional[str]:
        if self.position < len(self._input_str):
            return self._input_str[self.position]
        return None

    def advance(self):
        self.position += 1

    def at_end(self) -> bool:
        return self.position >= len(self._input_str)

    def skip_ws(self):
        if not self.ws:
            return
        in_len = len(self._input_str)
        while self.position < in_len \
                and self._input_str[self.position] in self.ws:
            self.position += 1

    def location(self, start_position: Optional[int] = None) -> Location:
        if start_position is None:
            start_position = self.position
        return Location(self._input_str, start_position,
                        end_position=self.position,
                        file_name=self.file_name)

    def __repr__(self):
        return f"Cursor({self._input_str!r}, position={self.position})"
