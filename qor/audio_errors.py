"""Readable names and messages for mixer and Vorbis decoder error codes."""

from __future__ import annotations

from typing import Dict, Tuple

AL_NO_ERROR = 0
AL_INVALID_NAME = 0xA001
AL_INVALID_ENUM = 0xA002
AL_INVALID_VALUE = 0xA003
AL_INVALID_OPERATION = 0xA004
AL_OUT_OF_MEMORY = 0xA005

OV_EREAD = -128
OV_EFAULT = -129
OV_ENOTVORBIS = -132
OV_EBADHEADER = -133
OV_EVERSION = -134

_AL_ERRORS: Dict[int, Tuple[str, str]] = {
    AL_INVALID_NAME: ("AL_INVALID_NAME", "Invalid name."),
    AL_INVALID_ENUM: ("AL_INVALID_ENUM", "Invalid enum."),
    AL_INVALID_VALUE: ("AL_INVALID_VALUE", "Invalid value."),
    AL_INVALID_OPERATION: ("AL_INVALID_OPERATION", "Invalid operation."),
    AL_OUT_OF_MEMORY: ("AL_OUT_OF_MEMORY", "Out of memory."),
}

_OV_ERRORS: Dict[int, Tuple[str, str]] = {
    OV_EREAD: ("OC_EREAD", "Read from media."),
    OV_ENOTVORBIS: ("OC_ENOTVORBIS", "Not Vorbis data."),
    OV_EVERSION: ("OV_EVERSION", "Vorbis version mismatch."),
    OV_EBADHEADER: ("OV_EBADHEADER", "Invalid Vorbis header."),
    OV_EFAULT: ("OV_EFAULT", "Internal logic fault (bug or heap/stack corruption."),
}


def error_string_al(code: int) -> Tuple[str, str]:
    """(name, message) for an audio library error code."""
    known = _AL_ERRORS.get(code)
    if known is not None:
        return known
    if code == AL_NO_ERROR:
        return ("", "No Error.")
    return (str(code), "Unknown Error Code")


def error_string_ov(code: int) -> Tuple[str, str]:
    """(name, message) for a Vorbis decoder return code."""
    known = _OV_ERRORS.get(code)
    if known is not None:
        return known
    if code:
        return (str(code), f"Unknown Error Code {code}")
    return ("", "No Error.")