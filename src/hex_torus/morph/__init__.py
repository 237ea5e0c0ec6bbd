"""Morph pipeline: flat -> cylinder -> twisted cylinder -> torus."""

from .stages import (
    f01_morph,
    f12_morph,
    f23_morph,
    morph_stage,
    STAGE_FUNCTIONS,
)
