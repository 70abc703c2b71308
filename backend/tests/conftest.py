"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Sample path data and SVG documents

TRIANGLE_D = "M10 10 L20 20 L30 10 Z"

RELATIVE_D = "m10 10 l10 0 l0 10"

SMOOTH_CUBIC_D = "M0 0 C10 0 10 10 0 10 S-10 20 0 20"

TRUNCATED_D = "M10 10 L20"

HOME_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"/>
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>
</svg>'''

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <circle cx="8" cy="9" r="1"/>
  <circle cx="16" cy="9" r="1"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

FILLED_COMPLEX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 256 259">
  <path d="M128 10 L240 80 L240 200 L128 249 L16 200 L16 80 Z" fill="#4ECDC4"/>
  <g transform="translate(0 0)">
    <path d="M128 50 L200 100 L200 180 L128 220 L56 180 L56 100 Z" fill="#45B7D1"/>
  </g>
  <circle cx="128" cy="130" r="30" fill="#FF6B6B"/>
</svg>'''

CURVES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path d="M10 80 Q 52.5 10, 95 80 T 180 80"/>
  <path d="M10 10 C 20 20, 40 20, 50 10 S 80 0, 90 10"/>
</svg>'''


@pytest.fixture
def home_svg() -> str:
    return HOME_SVG


@pytest.fixture
def smiley_svg() -> str:
    return SMILEY_SVG


@pytest.fixture
def filled_complex_svg() -> str:
    return FILLED_COMPLEX_SVG


@pytest.fixture
def curves_svg() -> str:
    return CURVES_SVG
