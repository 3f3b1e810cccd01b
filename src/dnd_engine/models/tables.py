"""D&D 5E rules tables.

Static data behind progression, spell slots and class features. These
values are load-bearing game data from the SRD: a wrong entry silently
over- or under-powers a character. Functions in dnd_engine.engine hand
out copies, never these dicts themselves.
"""

from __future__ import annotations

from dnd_engine.models.enums import CharacterClass

# =============================================================================
# XP Thresholds (PHB p.15)
# =============================================================================

XP_THRESHOLDS: dict[int, int] = {
    1: 0,
    2: 300,
    3: 900,
    4: 2700,
    5: 6500,
    6: 14000,
    7: 23000,
    8: 34000,
    9: 48000,
    10: 64000,
    11: 85000,
    12: 100000,
    13: 120000,
    14: 140000,
    15: 165000,
    16: 195000,
    17: 225000,
    18: 265000,
    19: 305000,
    20: 355000,
}

# =============================================================================
# XP Awards by Challenge Rating (DMG p.275)
# =============================================================================

XP_BY_CHALLENGE_RATING: dict[str, int] = {
    "0": 10,
    "1/8": 25,
    "1/4": 50,
    "1/2": 100,
    "1": 200,
    "2": 450,
    "3": 700,
    "4": 1100,
    "5": 1800,
    "6": 2300,
    "7": 2900,
    "8": 3900,
    "9": 5000,
    "10": 5900,
    "11": 7200,
    "12": 8400,
    "13": 10000,
    "14": 11500,
    "15": 13000,
    "16": 15000,
    "17": 18000,
    "18": 20000,
    "19": 22000,
    "20": 25000,
    "21": 33000,
    "22": 41000,
    "23": 50000,
    "24": 62000,
    "25": 75000,
    "26": 90000,
    "27": 105000,
    "28": 120000,
    "29": 135000,
    "30": 155000,
}

# =============================================================================
# Spell Slots
# =============================================================================

# Full casters; half casters look up ceil(level / 2) in this table
FULL_CASTER_SLOTS: dict[int, dict[int, int]] = {
    1:  {1: 2},
    2:  {1: 3},
    3:  {1: 4, 2: 2},
    4:  {1: 4, 2: 3},
    5:  {1: 4, 2: 3, 3: 2},
    6:  {1: 4, 2: 3, 3: 3},
    7:  {1: 4, 2: 3, 3: 3, 4: 1},
    8:  {1: 4, 2: 3, 3: 3, 4: 2},
    9:  {1: 4, 2: 3, 3: 3, 4: 3, 5: 1},
    10: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2},
    11: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1},
    12: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1},
    13: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1, 7: 1},
    14: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1, 7: 1},
    15: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1, 7: 1, 8: 1},
    16: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1, 7: 1, 8: 1},
    17: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1, 7: 1, 8: 1, 9: 1},
    18: {1: 4, 2: 3, 3: 3, 4: 3, 5: 3, 6: 1, 7: 1, 8: 1, 9: 1},
    19: {1: 4, 2: 3, 3: 3, 4: 3, 5: 3, 6: 2, 7: 1, 8: 1, 9: 1},
    20: {1: 4, 2: 3, 3: 3, 4: 3, 5: 3, 6: 2, 7: 2, 8: 1, 9: 1},
}

# Warlock pact magic, level: (slot_count, slot_level)
WARLOCK_PACT_SLOTS: dict[int, tuple[int, int]] = {
    1:  (1, 1),
    2:  (2, 1),
    3:  (2, 2),
    4:  (2, 2),
    5:  (2, 3),
    6:  (2, 3),
    7:  (2, 4),
    8:  (2, 4),
    9:  (2, 5),
    10: (2, 5),
    11: (3, 5),
    12: (3, 5),
    13: (3, 5),
    14: (3, 5),
    15: (3, 5),
    16: (3, 5),
    17: (4, 5),
    18: (4, 5),
    19: (4, 5),
    20: (4, 5),
}

# =============================================================================
# Hit Dice by Class
# =============================================================================

CLASS_HIT_DIE: dict[CharacterClass, int] = {
    CharacterClass.ARTIFICER: 8,
    CharacterClass.BARBARIAN: 12,
    CharacterClass.BARD: 8,
    CharacterClass.CLERIC: 8,
    CharacterClass.DRUID: 8,
    CharacterClass.FIGHTER: 10,
    CharacterClass.MONK: 8,
    CharacterClass.PALADIN: 10,
    CharacterClass.RANGER: 10,
    CharacterClass.ROGUE: 8,
    CharacterClass.SORCERER: 6,
    CharacterClass.WARLOCK: 8,
    CharacterClass.WIZARD: 6,
}

# =============================================================================
# Class Features by Level
# =============================================================================

CLASS_FEATURES: dict[CharacterClass, dict[int, list[str]]] = {
    CharacterClass.ARTIFICER: {
        1: ["Magical Tinkering", "Spellcasting"],
        2: ["Infuse Item"],
        3: ["Artificer Specialist", "The Right Tool for the Job"],
        4: ["Ability Score Improvement"],
        5: ["Specialist Feature"],
    },
    CharacterClass.BARBARIAN: {
        1: ["Rage", "Unarmored Defense"],
        2: ["Reckless Attack", "Danger Sense"],
        3: ["Primal Path", "Path Feature"],
        4: ["Ability Score Improvement"],
        5: ["Extra Attack", "Fast Movement"],
    },
    CharacterClass.BARD: {
        1: ["Spellcasting", "Bardic Inspiration (d6)"],
        2: ["Jack of All Trades", "Song of Rest (d6)"],
        3: ["Bard College", "Expertise"],
        4: ["Ability Score Improvement"],
        5: ["Bardic Inspiration (d8)", "Font of Inspiration"],
    },
    CharacterClass.CLERIC: {
        1: ["Spellcasting", "Divine Domain", "Domain Feature"],
        2: ["Channel Divinity (1/rest)", "Domain Feature"],
        3: ["2nd-level Spells"],
        4: ["Ability Score Improvement"],
        5: ["Destroy Undead (CR 1/2)"],
    },
    CharacterClass.DRUID: {
        1: ["Druidic", "Spellcasting"],
        2: ["Wild Shape", "Druid Circle"],
        3: ["2nd-level Spells"],
        4: ["Ability Score Improvement", "Wild Shape Improvement"],
        5: ["3rd-level Spells"],
    },
    CharacterClass.FIGHTER: {
        1: ["Fighting Style", "Second Wind"],
        2: ["Action Surge (1 use)"],
        3: ["Martial Archetype"],
        4: ["Ability Score Improvement"],
        5: ["Extra Attack"],
    },
    CharacterClass.MONK: {
        1: ["Unarmored Defense", "Martial Arts"],
        2: ["Ki", "Unarmored Movement"],
        3: ["Monastic Tradition", "Deflect Missiles"],
        4: ["Ability Score Improvement", "Slow Fall"],
        5: ["Extra Attack", "Stunning Strike"],
    },
    CharacterClass.PALADIN: {
        1: ["Divine Sense", "Lay on Hands"],
        2: ["Fighting Style", "Spellcasting", "Divine Smite"],
        3: ["Divine Health", "Sacred Oath"],
        4: ["Ability Score Improvement"],
        5: ["Extra Attack"],
    },
    CharacterClass.RANGER: {
        1: ["Favored Enemy", "Natural Explorer"],
        2: ["Fighting Style", "Spellcasting"],
        3: ["Ranger Conclave", "Primeval Awareness"],
        4: ["Ability Score Improvement"],
        5: ["Extra Attack"],
    },
    CharacterClass.ROGUE: {
        1: ["Expertise", "Sneak Attack", "Thieves' Cant"],
        2: ["Cunning Action"],
        3: ["Roguish Archetype"],
        4: ["Ability Score Improvement"],
        5: ["Uncanny Dodge"],
    },
    CharacterClass.SORCERER: {
        1: ["Spellcasting", "Sorcerous Origin"],
        2: ["Font of Magic"],
        3: ["Metamagic"],
        4: ["Ability Score Improvement"],
        5: ["3rd-level Spells"],
    },
    CharacterClass.WARLOCK: {
        1: ["Otherworldly Patron", "Pact Magic"],
        2: ["Eldritch Invocations"],
        3: ["Pact Boon"],
        4: ["Ability Score Improvement"],
        5: ["3rd-level Spells"],
    },
    CharacterClass.WIZARD: {
        1: ["Spellcasting", "Arcane Recovery"],
        2: ["Arcane Tradition"],
        3: ["2nd-level Spells"],
        4: ["Ability Score Improvement"],
        5: ["3rd-level Spells"],
    },
}


__all__ = [
    "XP_THRESHOLDS",
    "XP_BY_CHALLENGE_RATING",
    "FULL_CASTER_SLOTS",
    "WARLOCK_PACT_SLOTS",
    "CLASS_HIT_DIE",
    "CLASS_FEATURES",
]
