# -*- coding: utf-8 -*-
"""Winetricks verbs to suggest for a game, by release year.

Each runtime family is a table of year brackets. A bracket deliberately lists
several generations of the same runtime, games of that period often ship
with or expect any of them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Bracket:
    """Inclusive year range; ``None`` leaves that side open."""

    first: int | None
    last: int | None
    libraries: tuple[str, ...]

    def contains(self, year: int) -> bool:
        if self.first is not None and year < self.first:
            return False
        if self.last is not None and year > self.last:
            return False
        return True


COMMON: tuple[str, ...] = ("xact", "xact_x64", "xinput", "binkw32", "xaudio29", "openal")

VCRUN: tuple[Bracket, ...] = (
    Bracket(None, 2002, ("vcrun6",)),
    Bracket(2003, 2008, ("vcrun2003", "vcrun2005", "vcrun2008")),
    Bracket(2009, 2011, ("vcrun2005", "vcrun2008", "vcrun6sp6", "vcrun2010")),
    Bracket(2012, 2015, ("vcrun2008", "vcrun2012", "vcrun2013")),
    Bracket(2016, 2019, ("vcrun2013", "vcrun2015", "vcrun2017")),
    Bracket(2020, None, ("vcrun2017", "vcrun2019", "vcrun2022")),
)

VBRUN: tuple[Bracket, ...] = (
    Bracket(None, 1993, ("vb2run",)),
    Bracket(1994, 1998, ("vb2run", "vb3run", "vb4run")),
    Bracket(1999, 2001, ("vb3run", "vb4run", "dx8vb", "vb5run")),
    Bracket(2002, None, ("vb6run", "dx8vb")),
)

_DOTNET_LATEST = ("dotnetcore2", "dotnetcore3", "dotnet6", "dotnet7", "dotnet8")

DOTNET: tuple[Bracket, ...] = (
    Bracket(None, 2004, ("dotnet11", "dotnet11sp1")),
    Bracket(2005, 2006, ("dotnet11sp1", "dotnet20", "dotnet30")),
    Bracket(2007, 2007, ("dotnet20", "dotnet30sp1", "dotnet35")),
    Bracket(2008, 2008, ("dotnet20sp1", "dotnet35sp1")),
    Bracket(2009, 2011, ("dotnet20sp2", "dotnet40", "dotnet35sp1")),
    Bracket(2012, 2012, ("dotnet45", "dotnet452", "dotnet35sp1")),
    Bracket(2013, 2015, ("dotnet35sp1", "dotnet461", "dotnet46")),
    Bracket(2016, 2016, ("dotnet35sp1", "dotnet46", "dotnet462")),
    Bracket(2017, 2018, ("dotnet35sp1", "dotnet46", "dotnet471", "dotnet472")),
    Bracket(2019, 2019, ("dotnet471", "dotnet472", "dotnet48")),
    Bracket(2020, 2020, ("dotnet471", "dotnet472", "dotnet48", "dotnetcore2", "dotnetcore3")),
    Bracket(2021, 2022, _DOTNET_LATEST),
    Bracket(2023, 2023, ("dotnet48", "dotnetcore2", "dotnetcore3", "dotnet6", "dotnet7")),
    Bracket(2024, None, _DOTNET_LATEST),
)

# Excluded from recommend()
WMP: tuple[Bracket, ...] = (
    Bracket(None, 2005, ("wmp9",)),
    Bracket(2006, 2006, ("wmp10",)),
    Bracket(2007, None, ("wmp11",)),
)


def lookup(table: tuple[Bracket, ...], year: int) -> tuple[str, ...]:
    """Return the libraries of the bracket holding ``year``."""
    for bracket in table:
        if bracket.contains(year):
            return bracket.libraries
    raise ValueError(f"Year {year} is not covered by the table")


def recommend(year: int) -> list[str]:
    """Recommended winetricks verbs for a game released in ``year``.

    Order follows the tables (common first) and each verb appears once.
    """
    year = int(year)
    verbs: list[str] = []
    for libraries in (COMMON, lookup(VCRUN, year), lookup(VBRUN, year), lookup(DOTNET, year)):
        for library in libraries:
            if library not in verbs:
                verbs.append(library)
    return verbs
