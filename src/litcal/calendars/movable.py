"""
litcal.calendars.movable
------------------------
Celebrations whose date is given by an observance key of the movable table.
"""

from __future__ import annotations

from typing import List

from litcal.calendars.records import movable
from litcal.core.types import CalendarOrigin, CelebrationRank, LiturgicalColor, MovableCelebration

S = CelebrationRank.SOLEMNITY
F = CelebrationRank.FEAST
M = CelebrationRank.MEMORIAL

W = LiturgicalColor.WHITE
R = LiturgicalColor.RED
V = LiturgicalColor.VIOLET
RO = LiturgicalColor.ROSE

U = CalendarOrigin.UNIVERSAL


MOVABLE_CELEBRATIONS: List[MovableCelebration] = [
    # Christmas cycle
    movable("holy_family", "holy-family", "The Holy Family of Jesus, Mary and Joseph", F, W, U),
    movable("epiphany", "epiphany", "The Epiphany of the Lord", S, W, U,
            description="Christ is revealed to the nations in the visit of the Magi."),
    movable("baptism_of_the_lord", "baptism-of-the-lord", "The Baptism of the Lord", F, W, U,
            description="Closes the Christmas season."),
    # Lent and Holy Week; ranked with solemnities for precedence
    movable("ash_wednesday", "ash-wednesday", "Ash Wednesday", S, V, U,
            description="Beginning of Lent; a day of fasting and abstinence."),
    movable("laetare_sunday", "laetare-sunday", "Laetare Sunday", F, RO, U,
            description="Fourth Sunday of Lent, a pause of joy midway through the fast."),
    movable("palm_sunday", "palm-sunday", "Palm Sunday of the Passion of the Lord", S, R, U),
    movable("holy_monday", "holy-monday", "Monday of Holy Week", S, V, U),
    movable("holy_tuesday", "holy-tuesday", "Tuesday of Holy Week", S, V, U),
    movable("holy_wednesday", "holy-wednesday", "Wednesday of Holy Week", S, V, U),
    movable("holy_thursday", "holy-thursday", "Holy Thursday (Mass of the Lord's Supper)", S, W, U),
    movable("good_friday", "good-friday", "Good Friday of the Passion of the Lord", S, R, U),
    movable("holy_saturday", "holy-saturday", "Holy Saturday (Easter Vigil)", S, W, U),
    # Easter
    movable("easter_sunday", "easter", "Easter Sunday of the Resurrection of the Lord", S, W, U),
    movable("easter_monday", "easter-monday", "Easter Monday", S, W, U),
    movable("easter_tuesday", "easter-tuesday", "Easter Tuesday", S, W, U),
    movable("easter_wednesday", "easter-wednesday", "Easter Wednesday", S, W, U),
    movable("easter_thursday", "easter-thursday", "Easter Thursday", S, W, U),
    movable("easter_friday", "easter-friday", "Easter Friday", S, W, U),
    movable("easter_saturday", "easter-saturday", "Easter Saturday", S, W, U),
    movable("divine_mercy_sunday", "divine-mercy", "Divine Mercy Sunday", S, W, U),
    movable("ascension", "ascension", "The Ascension of the Lord", S, W, U),
    movable("pentecost", "pentecost", "Pentecost Sunday", S, R, U,
            description="The outpouring of the Holy Spirit; closes the Easter season."),
    # After Pentecost
    movable("mary_mother_of_the_church", "mary-mother-of-the-church",
            "The Blessed Virgin Mary, Mother of the Church", M, W, U),
    movable("trinity_sunday", "trinity", "The Most Holy Trinity", S, W, U),
    movable("corpus_christi", "corpus-christi",
            "The Most Holy Body and Blood of Christ (Corpus Christi)", S, W, U),
    movable("sacred_heart", "sacred-heart", "The Most Sacred Heart of Jesus", S, W, U),
    movable("immaculate_heart", "immaculate-heart", "The Immaculate Heart of the Blessed Virgin Mary", M, W, U),
    movable("christ_the_king", "christ-the-king", "Our Lord Jesus Christ, King of the Universe", S, W, U),
    # Advent
    movable("gaudete_sunday", "gaudete-sunday", "Gaudete Sunday", F, RO, U,
            description="Third Sunday of Advent, marked by rose vestments."),
]
