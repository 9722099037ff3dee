"""Inbound text frames.

Frames are ``:``-delimited tokens::

    PLAY:<label>:<index>   apply a move
    RESET                  clear the board
    LEAVE                  give up the seat

Anything else parses to an ``IGNORED`` frame. A ``PLAY`` frame that cannot be
parsed raises ``MalformedFrame``.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import MalformedFrame
from .types import BOARD_SIZE, Label

class FrameKind(str, Enum):
    PLAY = "PLAY"
    RESET = "RESET"
    LEAVE = "LEAVE"
    IGNORED = "IGNORED"

@dataclass(frozen=True)
class Frame:
    kind: FrameKind
    label: Optional[Label] = None
    index: Optional[int] = None
    raw: str = ""

def parse_frame(text: str) -> Frame:
    parts = text.split(":")
    head = parts[0]
    if head == FrameKind.PLAY.value:
        if len(parts) < 3:
            raise MalformedFrame(f"PLAY needs a label and an index: {text!r}")
        try:
            label = Label(parts[1])
        except ValueError:
            raise MalformedFrame(f"unknown label {parts[1]!r}")
        try:
            index = int(parts[2])
        except ValueError:
            raise MalformedFrame(f"cell index is not a number: {parts[2]!r}")
        if not 0 <= index < BOARD_SIZE:
            raise MalformedFrame(f"cell index out of range: {index}")
        return Frame(FrameKind.PLAY, label=label, index=index, raw=text)
    if head == FrameKind.RESET.value:
        return Frame(FrameKind.RESET, raw=text)
    if head == FrameKind.LEAVE.value:
        return Frame(FrameKind.LEAVE, raw=text)
    return Frame(FrameKind.IGNORED, raw=text)
