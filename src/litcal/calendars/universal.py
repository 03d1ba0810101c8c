"""
litcal.calendars.universal
--------------------------
Fixed-date celebrations of the General Roman Calendar.

Saints also kept by the Order of Preachers are tagged BOTH so that they stay
in the universal-only calendar as well.
"""

from __future__ import annotations

from typing import List

from litcal.calendars.records import fixed
from litcal.core.types import CalendarOrigin, CelebrationRank, FixedCelebration, LiturgicalColor

S = CelebrationRank.SOLEMNITY
F = CelebrationRank.FEAST
M = CelebrationRank.MEMORIAL
O = CelebrationRank.OPTIONAL_MEMORIAL  # noqa: E741

W = LiturgicalColor.WHITE
R = LiturgicalColor.RED
B = LiturgicalColor.BLACK

U = CalendarOrigin.UNIVERSAL
BOTH = CalendarOrigin.BOTH


UNIVERSAL_FIXED: List[FixedCelebration] = [
    # January
    fixed("01-01", "mary-mother-of-god", "Mary, the Holy Mother of God", S, W, U,
          description="The octave day of Christmas, honoring Mary's divine motherhood."),
    fixed("01-02", "basil-and-gregory", "Sts. Basil the Great and Gregory Nazianzen", M, W, U, doctor=True,
          description="Two Cappadocian bishops and friends who defended the faith of Nicaea.",
          died=389),
    fixed("01-17", "anthony-abbot", "St. Anthony, Abbot", M, W, U,
          biography="Egyptian hermit whose life in the desert shaped early monasticism.",
          patronage="Monks, farmers, domestic animals", born=251, died=356),
    fixed("01-21", "agnes", "St. Agnes, Virgin and Martyr", M, R, U,
          biography="Roman virgin martyred as a young girl under Diocletian.",
          patronage="Young girls, chastity", died=304),
    fixed("01-24", "francis-de-sales", "St. Francis de Sales, Bishop and Doctor", M, W, U, doctor=True,
          biography=(
              "Bishop of Geneva during the Reformation, known for his gentleness.",
              "His Introduction to the Devout Life taught holiness in every state of life.",
          ),
          patronage="Writers, journalists", born=1567, died=1622,
          works=("Introduction to the Devout Life", "Treatise on the Love of God")),
    fixed("01-25", "conversion-of-paul", "The Conversion of St. Paul, Apostle", F, W, U,
          description="Saul's encounter with the risen Lord on the road to Damascus."),
    fixed("01-26", "timothy-and-titus", "Sts. Timothy and Titus, Bishops", M, W, U),
    fixed("01-28", "thomas-aquinas", "St. Thomas Aquinas, Priest and Doctor", M, W, BOTH,
          order_member=True, doctor=True,
          biography=(
              "Dominican friar and theologian, called the Angelic Doctor.",
              "His Summa Theologiae remains a foundation of Catholic theology.",
          ),
          patronage="Students, universities, theologians", born=1225, died=1274,
          prayers="Grant me, O Lord my God, a mind to know you, a heart to seek you, wisdom to find you.",
          works=("Summa Theologiae", "Summa contra Gentiles")),
    fixed("01-31", "john-bosco", "St. John Bosco, Priest", M, W, U,
          biography="Founder of the Salesians, devoted to the education of poor youth in Turin.",
          patronage="Youth, apprentices, editors", born=1815, died=1888),
    # February
    fixed("02-02", "presentation-of-the-lord", "The Presentation of the Lord", F, W, U,
          description="Forty days after Christmas the Child is presented in the Temple."),
    fixed("02-05", "agatha", "St. Agatha, Virgin and Martyr", M, R, U, died=251),
    fixed("02-10", "scholastica", "St. Scholastica, Virgin", M, W, U,
          biography="Twin sister of St. Benedict and foundress of Benedictine nuns.",
          patronage="Nuns, against storms", born=480, died=543),
    fixed("02-11", "our-lady-of-lourdes", "Our Lady of Lourdes", O, W, U),
    fixed("02-14", "cyril-and-methodius", "Sts. Cyril, Monk, and Methodius, Bishop", M, W, U,
          patronage="Europe, the Slavic peoples"),
    fixed("02-22", "chair-of-peter", "The Chair of St. Peter, Apostle", F, W, U),
    fixed("02-23", "polycarp", "St. Polycarp, Bishop and Martyr", M, R, U, died=155),
    # March
    fixed("03-03", "katharine-drexel", "St. Katharine Drexel, Virgin", O, W, U,
          biography="Philadelphia heiress who founded the Sisters of the Blessed Sacrament.",
          patronage="Racial justice, philanthropists", born=1858, died=1955),
    fixed("03-07", "perpetua-and-felicity", "Sts. Perpetua and Felicity, Martyrs", M, R, U, died=203),
    fixed("03-17", "patrick", "St. Patrick, Bishop", O, W, U, patronage="Ireland", died=461),
    fixed("03-19", "joseph", "St. Joseph, Spouse of the Blessed Virgin Mary", S, W, U,
          patronage="The universal Church, fathers, workers"),
    fixed("03-25", "annunciation", "The Annunciation of the Lord", S, W, U,
          description="The angel Gabriel announces to Mary that she will bear the Son of God."),
    # April
    fixed("04-25", "mark", "St. Mark, Evangelist", F, R, U),
    fixed("04-29", "catherine-of-siena", "St. Catherine of Siena, Virgin and Doctor", M, W, BOTH,
          order_member=True, doctor=True,
          biography=(
              "Dominican tertiary and mystic who worked for the return of the papacy to Rome.",
              "Her Dialogue records her conversations with God.",
          ),
          patronage="Italy, Europe, nurses", born=1347, died=1380,
          works=("The Dialogue",)),
    # May
    fixed("05-01", "joseph-the-worker", "St. Joseph the Worker", O, W, U),
    fixed("05-03", "philip-and-james", "Sts. Philip and James, Apostles", F, R, U),
    fixed("05-14", "matthias", "St. Matthias, Apostle", F, R, U),
    fixed("05-31", "visitation", "The Visitation of the Blessed Virgin Mary", F, W, U),
    # June
    fixed("06-11", "barnabas", "St. Barnabas, Apostle", M, R, U),
    fixed("06-13", "anthony-of-padua", "St. Anthony of Padua, Priest and Doctor", M, W, U, doctor=True,
          patronage="Lost things, the poor", born=1195, died=1231),
    fixed("06-24", "nativity-of-john-the-baptist", "The Nativity of St. John the Baptist", S, W, U),
    fixed("06-29", "peter-and-paul", "Sts. Peter and Paul, Apostles", S, R, U),
    # July
    fixed("07-03", "thomas-apostle", "St. Thomas, Apostle", F, R, U),
    fixed("07-11", "benedict", "St. Benedict, Abbot", M, W, U,
          biography="Author of the Rule that shaped Western monastic life.",
          patronage="Europe, monks", born=480, died=547,
          works=("The Rule of St. Benedict",)),
    fixed("07-22", "mary-magdalene", "St. Mary Magdalene", F, W, U,
          description="First witness of the Resurrection, called the apostle to the apostles."),
    fixed("07-25", "james-apostle", "St. James, Apostle", F, R, U),
    fixed("07-26", "joachim-and-anne", "Sts. Joachim and Anne, Parents of the Blessed Virgin Mary", M, W, U),
    fixed("07-29", "martha-mary-lazarus", "Sts. Martha, Mary and Lazarus", M, W, U),
    fixed("07-31", "ignatius-of-loyola", "St. Ignatius of Loyola, Priest", M, W, U,
          patronage="Soldiers, retreats", born=1491, died=1556,
          works=("Spiritual Exercises",)),
    # August
    fixed("08-06", "transfiguration", "The Transfiguration of the Lord", F, W, U),
    fixed("08-08", "dominic", "St. Dominic, Priest", M, W, BOTH, order_member=True,
          biography=(
              "Castilian canon who founded the Order of Preachers in 1216.",
              "He sent his brothers to study and preach for the salvation of souls.",
          ),
          patronage="Astronomers, the Dominican Republic", born=1170, died=1221),
    fixed("08-10", "lawrence", "St. Lawrence, Deacon and Martyr", F, R, U, died=258),
    fixed("08-11", "clare", "St. Clare, Virgin", M, W, U, born=1194, died=1253),
    fixed("08-14", "maximilian-kolbe", "St. Maximilian Kolbe, Priest and Martyr", M, R, U,
          born=1894, died=1941),
    fixed("08-15", "assumption", "The Assumption of the Blessed Virgin Mary", S, W, U),
    fixed("08-20", "bernard", "St. Bernard, Abbot and Doctor", M, W, U, doctor=True, born=1090, died=1153),
    fixed("08-21", "pius-x", "St. Pius X, Pope", M, W, U, born=1835, died=1914),
    fixed("08-22", "queenship-of-mary", "The Queenship of the Blessed Virgin Mary", M, W, U),
    fixed("08-23", "rose-of-lima", "St. Rose of Lima, Virgin", O, W, BOTH, order_member=True,
          biography="Dominican tertiary, the first canonized saint of the Americas.",
          patronage="The Americas, Peru, gardeners", born=1586, died=1617),
    fixed("08-24", "bartholomew", "St. Bartholomew, Apostle", F, R, U),
    fixed("08-25", "louis-of-france", "St. Louis of France", O, W, U,
          patronage="France, Third Order of St. Francis, parents of large families", born=1214, died=1270),
    fixed("08-27", "monica", "St. Monica", M, W, U, patronage="Mothers", died=387),
    fixed("08-28", "augustine", "St. Augustine, Bishop and Doctor", M, W, U, doctor=True,
          biography="Bishop of Hippo whose Rule the Order of Preachers follows.",
          born=354, died=430, works=("Confessions", "The City of God")),
    fixed("08-29", "passion-of-john-the-baptist", "The Passion of St. John the Baptist", M, R, U),
    # September
    fixed("09-03", "gregory-the-great", "St. Gregory the Great, Pope and Doctor", M, W, U, doctor=True,
          born=540, died=604),
    fixed("09-08", "nativity-of-mary", "The Nativity of the Blessed Virgin Mary", F, W, U),
    fixed("09-13", "john-chrysostom", "St. John Chrysostom, Bishop and Doctor", M, W, U, doctor=True,
          died=407),
    fixed("09-14", "exaltation-of-the-cross", "The Exaltation of the Holy Cross", F, R, U),
    fixed("09-15", "our-lady-of-sorrows", "Our Lady of Sorrows", M, W, U),
    fixed("09-21", "matthew", "St. Matthew, Apostle and Evangelist", F, R, U),
    fixed("09-27", "vincent-de-paul", "St. Vincent de Paul, Priest", M, W, U, born=1581, died=1660),
    fixed("09-29", "archangels", "Sts. Michael, Gabriel and Raphael, Archangels", F, W, U),
    fixed("09-30", "jerome", "St. Jerome, Priest and Doctor", M, W, U, doctor=True, died=420,
          works=("The Vulgate",)),
    # October
    fixed("10-01", "therese-of-lisieux", "St. Thérèse of the Child Jesus, Virgin and Doctor", M, W, U,
          doctor=True,
          biography=(
              "Carmelite nun of Lisieux known as the Little Flower.",
              "Her 'Little Way' of doing small things with great love spread through her autobiography.",
          ),
          patronage="Missions, florists", born=1873, died=1897,
          works=("Story of a Soul",)),
    fixed("10-02", "guardian-angels", "The Holy Guardian Angels", M, W, U),
    fixed("10-04", "francis-of-assisi", "St. Francis of Assisi", M, W, U,
          patronage="Animals, ecology, Italy", born=1181, died=1226),
    fixed("10-07", "our-lady-of-the-rosary", "Our Lady of the Rosary", M, W, BOTH,
          description="Instituted after the victory of Lepanto; the Rosary is a treasured Dominican devotion."),
    fixed("10-15", "teresa-of-avila", "St. Teresa of Jesus, Virgin and Doctor", M, W, U, doctor=True,
          born=1515, died=1582, works=("The Interior Castle",)),
    fixed("10-17", "ignatius-of-antioch", "St. Ignatius of Antioch, Bishop and Martyr", M, R, U, died=107),
    fixed("10-18", "luke", "St. Luke, Evangelist", F, R, U),
    fixed("10-28", "simon-and-jude", "Sts. Simon and Jude, Apostles", F, R, U),
    # November
    fixed("11-01", "all-saints", "All Saints", S, W, U),
    fixed("11-02", "all-souls", "The Commemoration of All the Faithful Departed", F, B, U),
    fixed("11-03", "martin-de-porres", "St. Martin de Porres, Religious", O, W, BOTH, order_member=True,
          biography="Dominican lay brother of Lima who cared for the sick and the poor.",
          patronage="Social justice, barbers, people of mixed race", born=1579, died=1639),
    fixed("11-04", "charles-borromeo", "St. Charles Borromeo, Bishop", M, W, U, born=1538, died=1584),
    fixed("11-08", "elizabeth-of-the-trinity", "St. Elizabeth of the Trinity, Virgin", O, W, U,
          biography="Carmelite of Dijon whose writings centre on the indwelling Trinity.",
          born=1880, died=1906),
    fixed("11-09", "lateran-basilica", "The Dedication of the Lateran Basilica", F, W, U),
    fixed("11-10", "leo-the-great", "St. Leo the Great, Pope and Doctor", M, W, U, doctor=True, died=461),
    fixed("11-11", "martin-of-tours", "St. Martin of Tours, Bishop", M, W, U, died=397),
    fixed("11-15", "albert-the-great", "St. Albert the Great, Bishop and Doctor", O, W, BOTH,
          order_member=True, doctor=True,
          biography="Dominican bishop and scientist, teacher of St. Thomas Aquinas.",
          patronage="Scientists, natural sciences", born=1200, died=1280),
    fixed("11-21", "presentation-of-mary", "The Presentation of the Blessed Virgin Mary", M, W, U),
    fixed("11-22", "cecilia", "St. Cecilia, Virgin and Martyr", M, R, U, patronage="Musicians"),
    fixed("11-30", "andrew", "St. Andrew, Apostle", F, R, U, patronage="Scotland, fishermen"),
    # December
    fixed("12-03", "francis-xavier", "St. Francis Xavier, Priest", M, W, U, born=1506, died=1552),
    fixed("12-07", "ambrose", "St. Ambrose, Bishop and Doctor", M, W, U, doctor=True, died=397),
    fixed("12-08", "immaculate-conception", "The Immaculate Conception of the Blessed Virgin Mary", S, W, U),
    fixed("12-12", "our-lady-of-guadalupe", "Our Lady of Guadalupe", O, W, U),
    fixed("12-13", "lucy", "St. Lucy, Virgin and Martyr", M, R, U, died=304),
    fixed("12-14", "john-of-the-cross", "St. John of the Cross, Priest and Doctor", M, W, U, doctor=True,
          born=1542, died=1591, works=("The Dark Night of the Soul",)),
    fixed("12-20", "dominic-of-silos", "St. Dominic of Silos, Abbot", O, W, U,
          biography="Benedictine abbot of Silos, in whose honour St. Dominic de Guzmán was named.",
          patronage="Prisoners, shepherds, pregnant women", born=1000, died=1073),
    fixed("12-25", "nativity-of-the-lord", "The Nativity of the Lord (Christmas)", S, W, U),
    fixed("12-26", "stephen", "St. Stephen, the First Martyr", F, R, U),
    fixed("12-27", "john-apostle", "St. John, Apostle and Evangelist", F, W, U),
    fixed("12-28", "holy-innocents", "The Holy Innocents, Martyrs", F, R, U),
]
