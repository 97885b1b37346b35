#!/usr/bin/env python3

import argparse
import math
import os
import re

#============================================

UINT32_MAX = 4294967295

_DIGITS_RE = re.compile(r'[0-9]+')
_FLOAT_RE = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')
_NON_FINITE_RE = re.compile(r'[+-]?(?:inf|infinity|nan)', re.IGNORECASE)

#============================================

class PositiveIntError(RuntimeError):
	"""
	Base error for text that is not a positive 32-bit integer.
	"""

#============================================

class PositiveIntParseError(PositiveIntError):
	"""
	Text is not an unsigned 32-bit integer.
	"""

#============================================

class PositiveIntZeroError(PositiveIntError):
	"""
	Text parses, but the integer is zero.
	"""
	def __init__(self):
		super().__init__("Integer cannot be zero")

#============================================

def parse_unsigned_int(text: str) -> int:
	"""
	Parse text as an unsigned 32-bit integer.

	Only ASCII digits are accepted; signs, whitespace and
	underscores are parse errors.

	Args:
		text: Raw token from the command line.

	Returns:
		int: Parsed value in [0, UINT32_MAX].
	"""
	if text is None or text == "":
		raise PositiveIntParseError("cannot parse integer from empty string")
	if _DIGITS_RE.fullmatch(text) is None:
		raise PositiveIntParseError("invalid digit found in string")
	value = int(text)
	if value > UINT32_MAX:
		raise PositiveIntParseError("number too large to fit in target type")
	return value

#============================================

def parse_positive_int(text: str) -> int:
	"""
	Parse text as a positive (non-zero) unsigned 32-bit integer.

	Args:
		text: Raw token from the command line.

	Returns:
		int: Parsed value in [1, UINT32_MAX].
	"""
	value = parse_unsigned_int(text)
	if value == 0:
		raise PositiveIntZeroError()
	return value

#============================================

def unsigned_int_arg(text: str) -> int:
	try:
		return parse_unsigned_int(text)
	except PositiveIntError as exc:
		raise argparse.ArgumentTypeError(str(exc)) from exc

#============================================

def positive_int_arg(text: str) -> int:
	try:
		return parse_positive_int(text)
	except PositiveIntError as exc:
		raise argparse.ArgumentTypeError(str(exc)) from exc

#============================================

def finite_float_arg(text: str) -> float:
	"""
	Parse a signed decimal float such as -5, 0.25, .5 or 1e3.

	Whitespace, underscores and the nan/inf spellings are rejected.
	"""
	if _NON_FINITE_RE.fullmatch(text) is not None:
		raise argparse.ArgumentTypeError(f"value must be finite: '{text}'")
	if _FLOAT_RE.fullmatch(text) is None:
		raise argparse.ArgumentTypeError(f"invalid float literal: '{text}'")
	value = float(text)
	if not math.isfinite(value):
		raise argparse.ArgumentTypeError(f"value must be finite: '{text}'")
	return value

#============================================

def round_half_away(value: float) -> int:
	"""
	Round to the nearest integer, with halves rounded away from zero.
	"""
	value = float(value)
	magnitude = abs(value)
	whole = math.floor(magnitude)
	if magnitude - whole >= 0.5:
		whole += 1
	if value < 0:
		return -int(whole)
	return int(whole)

#============================================

def ensure_file_exists(filepath: str) -> None:
	if not os.path.isfile(filepath):
		raise RuntimeError(f"file not found: {filepath}")
	return

#============================================

def ensure_file_readable(filepath: str) -> None:
	ensure_file_exists(filepath)
	if not os.access(filepath, os.R_OK):
		raise RuntimeError(f"file not readable: {filepath}")
	return
