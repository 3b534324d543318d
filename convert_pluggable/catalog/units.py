"""Unit definition tables, grouped by dimension.

Each group lists its base unit (factor 1) first. Group order and unit order
within a group are significant: when an alias is shared between units
(``n``, ``hp``, ``pa``, ``ms``, ...) the earliest declaration wins.

Aliases, including the misspelled ones, are kept exactly as they have always
been accepted.
"""

from typing import Tuple

from .models import Dimension, UnitDefinition

M = Dimension.MASS
L = Dimension.LENGTH
D = Dimension.DURATION
P = Dimension.PRESSURE
E = Dimension.ENERGY
W = Dimension.POWER
A = Dimension.ANGLE
F = Dimension.FORCE
T = Dimension.TEMPERATURE


# metric ton is the base unit for mass
MASS: Tuple[UnitDefinition, ...] = (
    UnitDefinition("metric ton", ("tonne", "t", "mt", "te", "metric tons", "tonnes", "ts", "mts", "tes"), M, 1.0),
    UnitDefinition("ounce", ("oz", "ounces", "ozs"), M, 35274.0),
    UnitDefinition("pound", ("lb", "lbm", "pound mass", "pounds", "lbs", "lbms", "pounds mass"), M, 2204.62),
    UnitDefinition("stone", ("st", "stones", "sts"), M, 157.473),
    UnitDefinition("long ton", ("weight ton", "imperial ton", "long tons", "weight tons", "imperial tons"), M, 0.984207),
    UnitDefinition("microgram", ("mcg", "micrograms", "mcgs"), M, 1000000000.0),
    UnitDefinition("kilogram", ("kg", "kilo", "kilogramme", "kilograms", "kgs", "kilos", "kilogrammes"), M, 1000.0),
    UnitDefinition("gram", ("g", "gm", "gramme", "grams", "gs", "gms", "grammes"), M, 1000000.0),
    UnitDefinition("milligram", ("mg", "milligrams", "mgs"), M, 1000000000.0),
    UnitDefinition("ton", ("short ton", "short tons", "tons"), M, 1.10231),
)

# meter is the base unit for length
LENGTH: Tuple[UnitDefinition, ...] = (
    UnitDefinition("meter", ("meters", "metre", "metres", "m", "ms"), L, 1.0),
    UnitDefinition("kilometer", ("kilometers", "kilometre", "kilometres", "km", "kms", "klick", "klicks"), L, 0.001),
    UnitDefinition("centimeter", ("centimeters", "centimetre", "centimetres", "cm", "cms"), L, 100.0),
    UnitDefinition("millimeter", ("millimeters", "millimetre", "millimetres", "mm", "mms"), L, 1000.0),
    UnitDefinition("mile", ("miles", "statute mile", "statute miles", "land mile", "land miles"), L, 0.000621371),
    UnitDefinition("yard", ("yards", "yd", "yds", "yrds"), L, 1.09361),
    UnitDefinition(
        "foot",
        ("feet", "ft", "international foot", "international feet", "survey foot", "survey feet"),
        L,
        3.28084,
    ),
    UnitDefinition("inch", ("inches", "in", "ins"), L, 39.3701),
    UnitDefinition("nautical mile", ("nautical miles", "n", "ns", "nm", "nms", "nmi", "nmis"), L, 0.000539957),
    UnitDefinition("furlong", ("furlongs",), L, 1 / 201.168),
    UnitDefinition("chain", ("gunter's chains", "chains"), L, 1 / 20.1168),
    UnitDefinition("link", ("gunter's links", "links"), L, 1 / 0.201168),
    UnitDefinition("rod", ("rods",), L, 1 / 5.0292),
    UnitDefinition("fathom", ("fathoms", "ftm", "ftms"), L, 1 / 1.853184),
    UnitDefinition("league", ("leagues",), L, 1 / 4828.032),
    UnitDefinition("cable", ("cables",), L, 1 / 185.3184),
    UnitDefinition("light year", ("light years", "ly", "lys"), L, 1 / 9460730472580800),
    UnitDefinition("parsec", ("parsecs", "pc", "pcs"), L, 1 / 30856776376340067),
    UnitDefinition("astronomical unit", ("astronomical units", "au", "aus"), L, 1 / 149597870700),
)

# day is the base unit for time; a month is an average of 30.42 days
DURATION: Tuple[UnitDefinition, ...] = (
    UnitDefinition("day", ("days", "dy", "dys", "d"), D, 1.0),
    UnitDefinition("second", ("seconds", "sec", "s"), D, 86400.0),
    UnitDefinition("millisecond", ("milliseconds", "millisec", "millisecs", "ms"), D, 86400000.0),
    UnitDefinition("microsecond", ("microseconds", "microsec", "microsecs", "us"), D, 86400000000.0),
    UnitDefinition("minute", ("minutes", "min", "mins"), D, 1440.0),
    UnitDefinition("hour", ("hours", "hr", "hrs", "h"), D, 24.0),
    UnitDefinition("week", ("weeks", "wks", "wk"), D, 1 / 7),
    UnitDefinition("fortnight", (), D, 1 / 14),
    UnitDefinition("month", ("months", "mons", "mns", "mn"), D, 1 / 30.42),
    UnitDefinition("year", ("years", "yr", "yrs"), D, 1 / 365),
    UnitDefinition("leap year", ("leap years", "leapyear", "leapyr", "leapyrs"), D, 1 / 366),
)

# pascal is the base unit for pressure
PRESSURE: Tuple[UnitDefinition, ...] = (
    UnitDefinition("pascal", ("pascals", "pa", "pas"), P, 1.0),
    UnitDefinition("kilopascal", ("kilopascals", "kpa", "kpas"), P, 1 / 1000),
    UnitDefinition("megapascal", ("megapascals", "megapa", "megapas"), P, 1 / 1_000_000),
    UnitDefinition("gigapascal", ("gigapascals", "gpa", "gpas"), P, 1 / 1_000_000_000),
    UnitDefinition("bar", ("bars", "pa", "pas"), P, 1 / 100_000),
    UnitDefinition("atmosphere", ("atmospheres", "atm", "atms"), P, 1 / 101_325),
    UnitDefinition("pounds per square inch", ("psis", "psi", "lbs/inch^2", "p.s.i.", "p.s.i"), P, 1 / 6894.8),
)

# joule is the base unit for energy
ENERGY: Tuple[UnitDefinition, ...] = (
    UnitDefinition("joule", ("joules", "j", "js"), E, 1.0),
    UnitDefinition("watt-second", ("watt second", "watt seconds", "ws"), E, 1.0),
    UnitDefinition("watt-hour", ("watt hour", "watt hours", "wh"), E, 1 / 3600),
    UnitDefinition("kilowatt-hour", ("kilowatt hour", "kilowatt hours", "kwh"), E, 1 / 3_600_000),
    UnitDefinition("erg", ("ergon", "ergs", "ergons"), E, 1 / 10_000_000),
    UnitDefinition("electron volt", ("electronvolt", "electron volts", "ev", "evs"), E, 6.2415096e+18),
    UnitDefinition(
        "thermochemical gram calorie",
        ("small calories", "thermochemical gram calories", "chemical calorie", "chemical calories"),
        E,
        1 / 4.184,
    ),
    UnitDefinition(
        "large calorie",
        ("large calories", "food calorie", "food calories", "kcals", "kcal"),
        E,
        1 / 4184,
    ),
    UnitDefinition("british thermal unit", ("british thermal units", "btu", "btus"), E, 1 / 1054.5),
    UnitDefinition("ton of TNT", ("tnt equivilent", "tonnes of tnt", "tnt", "tons of tnt"), E, 1 / 4.184e+9),
)

# watt is the base unit for power
POWER: Tuple[UnitDefinition, ...] = (
    UnitDefinition("watt", ("watts", "w"), W, 1.0),
    UnitDefinition("kilowatt", ("kilowatts", "kw"), W, 1 / 1000),
    UnitDefinition("megawatt", ("megawatts", "mw"), W, 1 / 1_000_000),
    UnitDefinition("gigawatt", ("gigawatts", "jiggawatts", "gw"), W, 1 / 1_000_000_000),
    UnitDefinition("terawatt", ("terawatts", "tw"), W, 1 / 1_000_000_000_000),
    UnitDefinition("petawatt", ("petawatts", "pw"), W, 1 / 1_000_000_000_000_000),
    UnitDefinition("milliwatt", ("milliwatts",), W, 1000.0),
    UnitDefinition("microwatt", ("microwatts",), W, 1_000_000.0),
    UnitDefinition("nanowatt", ("nanowatts", "nw"), W, 1_000_000_000.0),
    UnitDefinition("picowatt", ("picowatts", "pw"), W, 1_000_000_000_000.0),
    UnitDefinition(
        "metric horsepower",
        ("metric horsepowers", "mhp", "hp", "ps", "cv", "hk", "ks", "ch"),
        W,
        1 / 735.49875,
    ),
    UnitDefinition(
        "horsepower",
        ("mechnical horsepower", "horsepower", "hp", "hp", "bhp"),
        W,
        1 / 745.69987158227022,
    ),
    UnitDefinition("electical horsepower", ("electical horsepowers", "hp", "hp"), W, 1 / 746),
)

# degree is the base unit for angles
ANGLE: Tuple[UnitDefinition, ...] = (
    UnitDefinition("degree", ("degrees", "deg", "degs"), A, 1.0),
    UnitDefinition("radian", ("radians", "rad", "rads"), A, 3.14159265358979323 / 180),
    UnitDefinition("gradian", ("gradians", "grad", "grads", "gon", "gons", "grade", "grades"), A, 10 / 9),
    UnitDefinition("quadrant", ("quadrants", "quads", "quad"), A, 1 / 90),
    UnitDefinition(
        "semi-circle",
        ("semi circle", "semicircle", "semi circles", "semicircles", "semi-circles"),
        A,
        1 / 180,
    ),
    UnitDefinition("revolution", ("revolutions", "circle", "circles", "revs"), A, 1 / 360),
)

# newton is the base unit for force
FORCE: Tuple[UnitDefinition, ...] = (
    UnitDefinition("newton", ("newtons", "n"), F, 1.0),
    UnitDefinition("kilonewton", ("kilonewtons", "kn"), F, 1 / 1000),
    UnitDefinition("meganewton", ("meganewtons", "mn"), F, 1 / 1_000_000),
    UnitDefinition("giganewton", ("giganewtons", "gn"), F, 1 / 1_000_000_000),
    UnitDefinition("dyne", ("dynes",), F, 1 / 100000),
    UnitDefinition("kilodyne", ("kilodynes",), F, 1 / 100),
    UnitDefinition("megadyne", ("megadynes",), F, 10.0),
    UnitDefinition("pounds force", ("lbs force", "pounds force"), F, 1 / 4.4482216152605),
    UnitDefinition("poundal", ("poundals", "pdl"), F, 1 / 0.138254954376),
)

# temperatures are converted with offsets, so every factor is 1;
# only the absolute scales (kelvin, rankine) reject negative values
TEMPERATURE: Tuple[UnitDefinition, ...] = (
    UnitDefinition("fahrenheit", ("f",), T, 1.0, allows_negative=True),
    UnitDefinition("celsius", ("c",), T, 1.0, allows_negative=True),
    UnitDefinition("kelvin", ("k",), T, 1.0),
    UnitDefinition("rankine", ("r",), T, 1.0),
    UnitDefinition("reaumur", ("re",), T, 1.0, allows_negative=True),
)

# Resolution priority: earlier groups win shared aliases.
UNIT_GROUPS: Tuple[Tuple[UnitDefinition, ...], ...] = (
    MASS,
    LENGTH,
    DURATION,
    PRESSURE,
    ENERGY,
    POWER,
    ANGLE,
    FORCE,
    TEMPERATURE,
)
