from __future__ import annotations

from upcase.units import Unit


class cupper(Unit):
    """
    Stands for "Convert to UPPER case"; the unit decodes the input as text and converts every
    character to its uppercase form. The case mapping is applied to the decoded text rather than
    to individual bytes, so the output can be longer than the input: For example, the German
    sharp s is converted to a double S.
    """
    def process(self, data: bytearray):
        return data.decode(self.codec).upper().encode(self.codec)
