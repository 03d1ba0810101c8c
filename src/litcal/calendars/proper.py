"""
litcal.calendars.proper
-----------------------
Proper calendar of the Order of Preachers: celebrations kept only by the
Dominican family. Shared saints live in the universal table tagged BOTH.
"""

from __future__ import annotations

from typing import List

from litcal.calendars.records import fixed
from litcal.core.types import CalendarOrigin, CelebrationRank, FixedCelebration, LiturgicalColor

F = CelebrationRank.FEAST
M = CelebrationRank.MEMORIAL
O = CelebrationRank.OPTIONAL_MEMORIAL  # noqa: E741

W = LiturgicalColor.WHITE
V = LiturgicalColor.VIOLET

P = CalendarOrigin.PROPER


PROPER_FIXED: List[FixedCelebration] = [
    fixed("01-07", "raymond-of-penafort", "St. Raymond of Penyafort, Priest", M, W, P, order_member=True,
          biography="Third Master of the Order and compiler of the Decretals of Gregory IX.",
          patronage="Canon lawyers", born=1175, died=1275),
    fixed("02-13", "catherine-de-ricci", "St. Catherine de' Ricci, Virgin", M, W, P, order_member=True,
          biography="Dominican nun of Prato, prioress and mystic of the Passion.",
          born=1522, died=1590),
    fixed("04-05", "vincent-ferrer", "St. Vincent Ferrer, Priest", F, W, P, order_member=True,
          biography="Valencian friar whose preaching moved crowds across Europe.",
          patronage="Builders, plumbers", born=1350, died=1419),
    fixed("04-20", "agnes-of-montepulciano", "St. Agnes of Montepulciano, Virgin", M, W, P, order_member=True,
          born=1268, died=1317),
    fixed("04-30", "pius-v", "St. Pius V, Pope", M, W, P, order_member=True,
          biography="Dominican pope who implemented the reforms of the Council of Trent.",
          born=1504, died=1572),
    fixed("05-13", "imelda-lambertini", "Bl. Imelda Lambertini, Virgin", O, W, P, order_member=True,
          patronage="First communicants", born=1322, died=1333),
    fixed("05-24", "translation-of-dominic", "Translation of Our Holy Father Dominic", M, W, P,
          description="Recalls the translation of St. Dominic's relics in Bologna in 1233."),
    fixed("08-17", "hyacinth", "St. Hyacinth, Priest", M, W, P, order_member=True,
          biography="Polish friar who carried the Order to Poland and beyond.",
          patronage="Poland", born=1185, died=1257),
    fixed("10-09", "louis-bertrand", "St. Louis Bertrand, Priest", M, W, P, order_member=True,
          patronage="Colombia", born=1526, died=1581),
    fixed("11-07", "all-saints-of-the-order", "All Saints of the Order of Preachers", F, W, P,
          description=(
              "Honors all the saints of the Order, canonized, beatified and unknown.",
              "It follows the universal feast of All Saints within the same week.",
          )),
    fixed("11-08", "anniversary-of-deceased-dominicans",
          "Anniversary of All Deceased Brothers and Sisters of the Order", M, V, P,
          description="Commemorates the deceased members of the Dominican family."),
    fixed("12-22", "patronage-of-mary-over-the-order",
          "Patronage of the Blessed Virgin Mary over the Order of Preachers", M, W, P),
]
