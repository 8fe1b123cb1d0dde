"""The built-in 8x8 bitmap font, stored as a packed 6-bit text encoding."""

from __future__ import annotations

from typing import Iterator

from .pixel import Pixel
from .sprite import Sprite

GLYPH_SIZE = 8
GLYPHS_PER_ROW = 16
FIRST_CHAR = 32
FONT_WIDTH = 128
FONT_HEIGHT = 48

_INK = Pixel(255, 255, 255, 255)
_PAPER = Pixel(0, 0, 0, 0)

# Each group of four characters packs 24 bits (6 per character, offset by 48);
# bits run down the sheet column by column.
_FONT_DATA = "".join(
    (
        "?Q`0001oOch0o01o@F40o0<AGD4090LAGD<090@A7ch0?00O7Q`0600>00000000",
        "O000000nOT0063Qo4d8>?7a14Gno94AA4gno94AaOT0>o3`oO400o7QN00000400",
        "Of80001oOg<7O7moBGT7O7lABET024@aBEd714AiOdl717a_=TH013Q>00000000",
        "720D000V?V5oB3Q_HdUoE7a9@DdDE4A9@DmoE4A;Hg]oM4Aj8S4D84@`00000000",
        "OaPT1000Oa`^13P1@AI[?g`1@A=[OdAoHgljA4Ao?WlBA7l1710007l100000000",
        "ObM6000oOfMV?3QoBDD`O7a0BDDH@5A0BDD<@5A0BGeVO5ao@CQR?5Po00000000",
        "Oc``000?Ogij70PO2D]??0Ph2DUM@7i`2DTg@7lh2GUj?0TO0C1870T?00000000",
        "70<4001o?P<7?1QoHg43O;`h@GT0@:@LB@d0>:@hN@L0@?aoN@<0O7ao0000?000",
        "OcH0001SOglLA7mg24TnK7ln24US>0PL24U140PnOgl0>7QgOcH0K71S0000A000",
        "00H00000@Dm1S007@DUSg00?OdTnH7YhOfTL<7Yh@Cl0700?@Ah0300700000000",
        "<008001QL00ZA41a@6HnI<1i@FHLM81M@@0LG81?O`0nC?Y7?`0ZA7Y300080000",
        "O`082000Oh0827mo6>Hn?Wmo?6HnMb11MP08@C11H`08@FP0@@0004@000000000",
        "00P00001Oab00003OcKP0006@6=PMgl<@440MglH@000000`@000001P00000000",
        "Ob@8@@00Ob@8@Ga13R@8Mga172@8?PAo3R@827QoOb@820@0O`0007`0000007P0",
        "O`000P08Od400g`<3V=P0G`673IP0`@3>1`00P@6O`P00g`<O`000GP800000000",
        "?P9PL020O`<`N3R0@E4HC7b0@ET<ATB0@@l6C4B0O`H3N7b0?P01L3R000000020",
    )
)


def _column_major_bits() -> Iterator[bool]:
    chars = iter(_FONT_DATA)
    for chunk in zip(chars, chars, chars, chars):
        value = 0
        for ch in chunk:
            value = (value << 6) | (ord(ch) - 48)
        for bit in range(24):
            yield bool((value >> bit) & 1)


def build_font_sprite() -> Sprite:
    """Decode the font sheet: 16x6 glyphs of 8x8 pixels for characters 32..127."""
    sprite = Sprite(FONT_WIDTH, FONT_HEIGHT)
    for index, lit in enumerate(_column_major_bits()):
        x, y = divmod(index, FONT_HEIGHT)
        sprite.set_pixel(x, y, _INK if lit else _PAPER)
    return sprite