"""Display text for each supported user-interface language."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class Language(Enum):
    """Languages the display text is available in."""

    ENGLISH = "english"
    SPANISH = "spanish"
    CZECH = "czech"
    ITALIAN = "italian"
    PORTUGUESE_BRASIL = "portuguese_brasil"
    GERMAN = "german"
    FRENCH = "french"
    DUTCH = "dutch"
    NORWEGIAN_BOKMAAL = "norwegian_bokmaal"


@dataclass(frozen=True)
class DisplayStrings:
    """The strings shown on the display and the Nextion panel for one language.

    Leading and trailing spaces are part of the strings.
    """

    moon: str
    sun: str
    az_target: str
    el_target: str
    target: str
    parking: str
    parked: str
    cw: str
    ccw: str
    up: str
    down: str
    azimuth: str
    azimuth_no_space: str
    az: str
    az_space: str
    elevation: str
    elevation_no_space: str
    space_el: str
    space_el_space: str
    gps: str
    n: str
    w: str
    s: str
    e: str
    nw: str
    sw: str
    se: str
    ne: str
    nnw: str
    wnw: str
    wsw: str
    ssw: str
    sse: str
    ese: str
    ene: str
    nne: str
    nextion_gps: str
    nextion_parking: str
    nextion_parked: str
    nextion_overlap: str

    @property
    def compass_points(self) -> tuple[str, ...]:
        """The sixteen compass point names, clockwise from north."""
        return (
            self.n, self.nne, self.ne, self.ene,
            self.e, self.ese, self.se, self.sse,
            self.s, self.ssw, self.sw, self.wsw,
            self.w, self.wnw, self.nw, self.nnw,
        )

    def compass_point(self, heading: float) -> str:
        """Name of the compass point nearest ``heading`` in degrees."""
        if not math.isfinite(heading):
            raise ValueError(f"heading must be a finite number: {heading!r}")
        sector = int(((heading % 360.0) + 11.25) // 22.5) % 16
        return self.compass_points[sector]


_ENGLISH = DisplayStrings(
    moon="moon ", sun="sun ",
    az_target="Az Target ", el_target="El Target ", target="Target ",
    parking="Parking", parked="Parked",
    cw="CW", ccw="CCW", up="UP", down="DOWN",
    azimuth="Azimuth ", azimuth_no_space="Azimuth",
    az="Az", az_space="Az ",
    elevation="Elevation ", elevation_no_space="Elevation",
    space_el=" El", space_el_space=" El ",
    gps="GPS",
    n="N", w="W", s="S", e="E",
    nw="NW", sw="SW", se="SE", ne="NE",
    nnw="NNW", wnw="WNW", wsw="WSW", ssw="SSW",
    sse="SSE", ese="ESE", ene="ENE", nne="NNE",
    nextion_gps="Sats", nextion_parking="PARKING",
    nextion_parked="PARKED", nextion_overlap="OVERLAP",
)

_SPANISH = DisplayStrings(
    moon="Luna ", sun="Sol ",
    az_target="Az Objetivo ", el_target="El Objetivo ", target="Objetivo ",
    parking="Aparcando", parked="Aparcado",
    cw="Dcha", ccw="Izq", up="Arriba", down="Abajo",
    azimuth="Azimuth ", azimuth_no_space="Azimuth",
    az="Az", az_space="Az ",
    elevation="Elevation ", elevation_no_space="Elevation",
    space_el=" El", space_el_space=" El ",
    gps="GPS",
    n="N", w="O", s="S", e="E",
    nw="NO", sw="SO", se="SE", ne="NE",
    nnw="NNO", wnw="ONO", wsw="OSO", ssw="SSO",
    sse="SSE", ese="ESE", ene="ENE", nne="NNE",
    nextion_gps="SV", nextion_parking="PARKING",
    nextion_parked="PARKED", nextion_overlap="OVERLAP",
)

_CZECH = DisplayStrings(
    moon="mesic ", sun="slunce ",
    az_target="Az cíl ", el_target="El cíl ", target="Cil ",
    parking="Parking", parked="Parkovat",
    cw="CW", ccw="CCW", up="Nahoru", down="Dolu",
    azimuth="Azimut ", azimuth_no_space="Azimut",
    az="Az", az_space="Az ",
    elevation="Elevation ", elevation_no_space="Elevation",
    space_el=" El", space_el_space=" El ",
    gps="GPS",
    n="smer   ^   KL", w="smer   <   HK", s="smer   v   ZS", e="smer   >   VK",
    nw="smer   <    W", sw="smer   v  VP8", se="smer   >   HZ", ne="smer   ^   JA",
    nnw="smer   ^   VE", wnw="smer   <   CO", wsw="smer   <   PY", ssw="smer   v  ZD9",
    sse="smer   v   5R", ese="smer   >   8Q", ene="smer   >   ZL", nne="smer   ^  UA0",
    nextion_gps="SV", nextion_parking="PARKING",
    nextion_parked="PARKED", nextion_overlap="OVERLAP",
)

_ITALIAN = DisplayStrings(
    moon="luna", sun="sole ",
    az_target="Punta Az  ", el_target="Punta El  ", target="Punta  ",
    parking="Posando", parked="Posato",
    cw="DX", ccw="SX ", up="SU", down="GIU'",
    azimuth="Azimuth ", azimuth_no_space="Azimuth",
    az="Az", az_space="Az ",
    elevation="Elevation ", elevation_no_space="Elevation",
    space_el=" El", space_el_space=" El ",
    gps="GPS",
    n="N", w="W", s="S", e="E",
    nw="NW", sw="SW", se="SE", ne="NE",
    nnw="NNW", wnw="WNW", wsw="WSW", ssw="SSW",
    sse="SSE", ese="ESE", ene="ENE", nne="NNE",
    nextion_gps="SV", nextion_parking="PARKING",
    nextion_parked="PARKED", nextion_overlap="OVERLAP",
)

_PORTUGUESE_BRASIL = DisplayStrings(
    moon="lua ", sun="sol ",
    az_target="Objetivo Az ", el_target="Objetivo El ", target="Objetivo ",
    parking="Parking", parked="Estacionado",
    cw="DIR", ccw="ESQ", up="SOBE", down="DESCE",
    azimuth="Azimute ", azimuth_no_space="Azimute",
    az="Az", az_space="Az ",
    elevation="Elevation ", elevation_no_space="Elevation",
    space_el=" El", space_el_space=" El ",
    gps="GPS",
    n="N", w="O", s="S", e="L",
    nw="NO", sw="SO", se="SL", ne="NL",
    nnw="NNO", wnw="ONO", wsw="OSO", ssw="SSO",
    sse="SSL", ese="LSL", ene="LNL", nne="NNL",
    nextion_gps="SV", nextion_parking="PARKING",
    nextion_parked="PARKED", nextion_overlap="OVERLAP",
)

_GERMAN = DisplayStrings(
    moon="MOND ", sun="SONNE ",
    az_target="Az Ziel ", el_target="El Ziel ", target="Ziel ",
    parking="Parken", parked="Geparkt",
    cw="CW", ccw="CCW", up="AUF", down="AB",
    azimuth="Azimuth ", azimuth_no_space="Azimuth",
    az="Az", az_space="Az ",
    elevation="Elevation ", elevation_no_space="Elevation",
    space_el=" El", space_el_space=" El ",
    gps="GPS",
    n="N  (KL)", w="W  (HK)", s="S  (ZS)", e="O  (YB)",
    nw="NW  (W8)", sw="SW  (PY)", se="SO  (HZ)", ne="NO  (JA",
    nnw="NNW (VE)", wnw="WNW (XE)", wsw="WSW (OA)", ssw="SSW  (ZD7)",
    sse="SSO (5R)", ese="OSO (8Q)", ene="ONO (ZL)", nne="NNO (UA0)",
    nextion_gps="SV", nextion_parking="PARKING",
    nextion_parked="PARKED", nextion_overlap="OVERLAP",
)

_FRENCH = DisplayStrings(
    moon="lune ", sun="soleil ",
    az_target="Az Cible ", el_target="Él Cible ", target="Cible ",
    parking="Parcage", parked="Garé",
    cw="SH", ccw="SAH", up="HAUSSE", down="BAISSE",
    azimuth="Azimut ", azimuth_no_space="Azimut",
    az="Az", az_space="Az ",
    elevation="Elevation ", elevation_no_space="Elevation",
    space_el=" Él", space_el_space=" Él ",
    gps="GPS",
    n="N", w="O", s="S", e="E",
    nw="NO", sw="SO", se="SE", ne="NE",
    nnw="NNO", wnw="ONO", wsw="OSO", ssw="SSO",
    sse="SSE", ese="ESE", ene="ENE", nne="NNE",
    nextion_gps="SV", nextion_parking="PARKING",
    nextion_parked="PARKED", nextion_overlap="OVERLAP",
)

_DUTCH = DisplayStrings(
    moon="maan ", sun="zon ",
    az_target="Az Doel ", el_target="El Doel ", target="Doel ",
    parking="Parkeren", parked="Geparkeerd",
    cw="CW", ccw="CCW", up="OP", down="Neer",
    azimuth="Azimuth ", azimuth_no_space="Azimuth",
    az="Az", az_space="Az ",
    elevation="Elevation ", elevation_no_space="Elevation",
    space_el=" El", space_el_space=" El ",
    gps="GPS",
    n="N", w="W", s="Z", e="O",
    nw="NW", sw="ZW", se="ZO", ne="NO",
    nnw="NNW", wnw="WNW", wsw="WZW", ssw="ZZW",
    sse="ZZO", ese="OZO", ene="ONO", nne="NNO",
    nextion_gps="SV", nextion_parking="PARKING",
    nextion_parked="PARKED", nextion_overlap="OVERLAP",
)

_NORWEGIAN_BOKMAAL = DisplayStrings(
    moon="Måne", sun="Sol",
    az_target="As mål", el_target="El mål", target="Mål",
    parking="Parkerer", parked="Parkert",
    cw="Med klokken", ccw="Mot klokken", up="Opp", down="Ned",
    azimuth="Asimut", azimuth_no_space="Asimut",
    az="As", az_space="As",
    elevation="Elevasjon", elevation_no_space="Elevasjon",
    space_el="El", space_el_space="El",
    gps="GPS",
    n="N", w="V", s="S", e="Ø",
    nw="NV", sw="SV", se="SØ", ne="NØ",
    nnw="NNV", wnw="VNV", wsw="VSV", ssw="SSV",
    sse="SSØ", ese="ØSØ", ene="ØNØ", nne="NNØ",
    nextion_gps="Satelitter", nextion_parking="Parkerer",
    nextion_parked="Parkert", nextion_overlap="Overlapp",
)

_STRINGS: dict[Language, DisplayStrings] = {
    Language.ENGLISH: _ENGLISH,
    Language.SPANISH: _SPANISH,
    Language.CZECH: _CZECH,
    Language.ITALIAN: _ITALIAN,
    Language.PORTUGUESE_BRASIL: _PORTUGUESE_BRASIL,
    Language.GERMAN: _GERMAN,
    Language.FRENCH: _FRENCH,
    Language.DUTCH: _DUTCH,
    Language.NORWEGIAN_BOKMAAL: _NORWEGIAN_BOKMAAL,
}


def _to_language(language: Language | str) -> Language:
    if isinstance(language, Language):
        return language
    if isinstance(language, str):
        key = language.strip().lower()
        for candidate in Language:
            if key in (candidate.value, candidate.name.lower()):
                return candidate
    raise ValueError(f"unsupported language: {language!r}")


def get_strings(language: Language | str = Language.ENGLISH) -> DisplayStrings:
    """The display strings for ``language``, given as a Language or its name."""
    return _STRINGS[_to_language(language)]