# AreaStats
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

from .sources import BufferSource, FileSource, InputSource

__all__ = ["BufferSource", "FileSource", "InputSource"]
