from __future__ import annotations

from typing import Optional


class DegenerateSpectrumError(RuntimeError):
    """The windowed spectrum has no usable peak (zero magnitude at the maximum).

    Attributes
    ----------
    iteration:
        0-based index of the component being extracted when the failure
        occurred, or ``None`` when raised outside the decomposition loop.
    bin:
        FFT bin of the (zero) maximum.
    """

    def __init__(self, message: str, *, iteration: Optional[int] = None, bin: Optional[int] = None) -> None:
        super().__init__(message)
        self.iteration = iteration
        self.bin = bin
