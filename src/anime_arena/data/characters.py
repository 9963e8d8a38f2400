"""Built-in character roster.

Raw catalog data, validated by ``catalog.load_catalog``. Simple moves use the
single ``effect`` form; composite moves use an ``effects`` list.
"""

from typing import Any

CHARACTERS: dict[str, dict[str, Any]] = {
    "p001": {
        "id": "p001",
        "name": "Kanao Tsuyuri",
        "sprite": "Kanao.png",
        "hp": 85,
        "attack": 110,
        "defense": 70,
        "moves": [
            {"id": "m001", "name": "Crimson Slash", "power": 70, "accuracy": 0.95},
            {"id": "m002", "name": "Plum Spirit", "power": 0, "accuracy": 1.0, "effect": "defense_up", "value": 1},
            {"id": "m003", "name": "Vermilion Eye", "power": 70, "accuracy": 0.6, "recoil_damage": 20},
            {"id": "m004", "name": "Flower Breathing", "power": 0, "accuracy": 1.0, "effect": "attack_up", "value": 2},
        ],
    },
    "p002": {
        "id": "p002",
        "name": "Naruto Uzumaki",
        "sprite": "NarutoUzumaki.png",
        "hp": 110,
        "attack": 95,
        "defense": 80,
        "moves": [
            {"id": "m005", "name": "Rasengan", "power": 50, "accuracy": 1.0},
            {"id": "m006", "name": "Shadow Clones", "power": 0, "accuracy": 1.0, "effect": "defense_up", "value": 2},
            {
                "id": "m007",
                "name": "Nine-Tails Chakra",
                "power": 0,
                "accuracy": 1.0,
                "effect": "attack_up",
                "value": 2,
                "hp_cost": 15,
            },
            {"id": "m008", "name": "Giant Rasengan", "power": 60, "accuracy": 0.9},
        ],
    },
    "p003": {
        "id": "p003",
        "name": "Sasuke Uchiha",
        "sprite": "SasukeUchiha.png",
        "hp": 90,
        "attack": 105,
        "defense": 75,
        "moves": [
            {"id": "m009", "name": "Chidori", "power": 95, "accuracy": 1.0, "effect": "self_defense_down", "value": 1},
            {"id": "m010", "name": "Fireball Jutsu", "power": 75, "accuracy": 1.0},
            {"id": "m011", "name": "Sharingan", "power": 0, "accuracy": 1.0, "effect": "accuracy_up", "value": 1},
            {"id": "m012", "name": "Kirin", "power": 150, "accuracy": 0.85, "recoil_damage": 25},
        ],
    },
    "p004": {
        "id": "p004",
        "name": "Goku",
        "sprite": "Goku.png",
        "hp": 100,
        "attack": 100,
        "defense": 90,
        "moves": [
            {"id": "m013", "name": "Kamehameha", "power": 90, "accuracy": 1.0},
            {
                "id": "m014",
                "name": "Kaioken",
                "power": 0,
                "accuracy": 1.0,
                "effect": "attack_up",
                "value": 2,
                "recoil_damage": 20,
            },
            {
                "id": "m015",
                "name": "Instant Transmission",
                "power": 0,
                "accuracy": 1.0,
                "effect": "defense_up",
                "value": 1,
            },
            # One turn of charging before it fires
            {"id": "m016", "name": "Spirit Bomb", "power": 180, "accuracy": 0.9, "charge_turns": 1},
        ],
    },
    "p005": {
        "id": "p005",
        "name": "Vegeta",
        "sprite": "Vegeta.png",
        "hp": 95,
        "attack": 105,
        "defense": 85,
        "moves": [
            {"id": "m017", "name": "Galick Gun", "power": 85, "accuracy": 1.0},
            {"id": "m018", "name": "Saiyan Pride", "power": 0, "accuracy": 1.0, "effect": "attack_up", "value": 2},
            {"id": "m019", "name": "Big Bang Attack", "power": 100, "accuracy": 0.95},
            {
                "id": "m020",
                "name": "Final Flash",
                "power": 140,
                "accuracy": 0.9,
                "effect": "self_defense_down",
                "value": 2,
            },
        ],
    },
    "p006": {
        "id": "p006",
        "name": "Monkey D. Luffy",
        "sprite": "Luffy.png",
        "hp": 120,
        "attack": 95,
        "defense": 90,
        "moves": [
            {"id": "m021", "name": "Gum-Gum Pistol", "power": 70, "accuracy": 1.0},
            {
                "id": "m022",
                "name": "Gear Second",
                "power": 0,
                "accuracy": 1.0,
                "effect": "attack_up",
                "value": 1,
                "hp_cost": 10,
            },
            {"id": "m023", "name": "Gum-Gum Gatling", "power": 25, "accuracy": 0.95, "hits": 3},
            {"id": "m024", "name": "Elephant Gun", "power": 130, "accuracy": 0.9},
        ],
    },
    "p007": {
        "id": "p007",
        "name": "Roronoa Zoro",
        "sprite": "RoronoaZoro.png",
        "hp": 95,
        "attack": 115,
        "defense": 80,
        "moves": [
            {"id": "m025", "name": "Oni Giri", "power": 15, "accuracy": 1.0},
            {"id": "m026", "name": "Dragon Twister", "power": 25, "accuracy": 0.7},
            {"id": "m027", "name": "Shishi Sonson", "power": 70, "accuracy": 1.0, "high_crit_chance": True},
            {
                "id": "m028",
                "name": "Asura",
                "power": 0,
                "accuracy": 1.0,
                "effects": [
                    {"type": "attack_up", "value": 3},
                    {"type": "self_defense_down", "value": 1},
                ],
            },
        ],
    },
    "p008": {
        "id": "p008",
        "name": "Eren Yeager",
        "sprite": "ErenYeager.png",
        "hp": 130,
        "attack": 100,
        "defense": 65,
        "moves": [
            {"id": "m029", "name": "Titan Punch", "power": 90, "accuracy": 0.95},
            {"id": "m030", "name": "Harden", "power": 0, "accuracy": 1.0, "effect": "defense_up", "value": 2},
            {
                "id": "m031",
                "name": "Berserk Rage",
                "power": 0,
                "accuracy": 1.0,
                "effects": [
                    {"type": "attack_up", "value": 2},
                    {"type": "self_defense_down", "value": 2},
                ],
            },
            {"id": "m032", "name": "Colossal Strike", "power": 150, "accuracy": 0.8, "recoil_damage": 40},
        ],
    },
    "p009": {
        "id": "p009",
        "name": "Mikasa Ackerman",
        "sprite": "MikasaAckerman.png",
        "hp": 80,
        "attack": 110,
        "defense": 75,
        "moves": [
            {"id": "m033", "name": "Blade Dance", "power": 40, "accuracy": 0.9, "hits": 2},
            {"id": "m034", "name": "Gas Burst", "power": 0, "accuracy": 1.0, "effect": "defense_up", "value": 1},
            # Ignores 25% of defense
            {
                "id": "m035",
                "name": "Thunder Spear",
                "power": 110,
                "accuracy": 0.9,
                "effect": "defense_ignore",
                "value": 0.25,
            },
            {"id": "m036", "name": "Steel Resolve", "power": 0, "accuracy": 1.0, "effect": "attack_up", "value": 2},
        ],
    },
    "p010": {
        "id": "p010",
        "name": "Satoru Gojo",
        "sprite": "SatoruGojo.png",
        "hp": 90,
        "attack": 120,
        "defense": 80,
        "moves": [
            {"id": "m037", "name": "Cursed Technique: Red", "power": 20, "accuracy": 1.0},
            {"id": "m038", "name": "Limitless", "power": 0, "accuracy": 1.0, "effect": "invulnerable", "turns": 1},
            {"id": "m039", "name": "Six Eyes", "power": 0, "accuracy": 1.0, "effect": "accuracy_up", "value": 2},
            {"id": "m040", "name": "Hollow Purple", "power": 70, "accuracy": 0.6, "hp_cost": 30},
        ],
    },
    "p011": {
        "id": "p011",
        "name": "Yuji Itadori",
        "sprite": "YujiItadori.png",
        "hp": 105,
        "attack": 100,
        "defense": 85,
        "moves": [
            {"id": "m041", "name": "Divergent Fist", "power": 75, "accuracy": 1.0},
            {
                "id": "m042",
                "name": "Cursed Energy Flow",
                "power": 0,
                "accuracy": 1.0,
                "effect": "attack_up",
                "value": 1,
            },
            {"id": "m043", "name": "Slaughter Demon", "power": 85, "accuracy": 0.95},
            {"id": "m044", "name": "Black Flash", "power": 120, "accuracy": 0.75, "high_crit_chance": True},
        ],
    },
    "p012": {
        "id": "p012",
        "name": "Izuku Midoriya",
        "sprite": "IzukuMidoriya.png",
        "hp": 90,
        "attack": 100,
        "defense": 80,
        "moves": [
            {"id": "m045", "name": "Delaware Smash", "power": 70, "accuracy": 1.0},
            {
                "id": "m046",
                "name": "Full Cowl",
                "power": 0,
                "accuracy": 1.0,
                "effects": [
                    {"type": "attack_up", "value": 1},
                    {"type": "defense_up", "value": 1},
                ],
            },
            {"id": "m047", "name": "Detroit Smash", "power": 110, "accuracy": 0.95, "recoil_damage": 20},
            {"id": "m048", "name": "One For All 100%", "power": 160, "accuracy": 0.9, "recoil_damage": 50},
        ],
    },
    "p013": {
        "id": "p013",
        "name": "Katsuki Bakugo",
        "sprite": "KatsukiBakugo.png",
        "hp": 85,
        "attack": 115,
        "defense": 70,
        "moves": [
            {"id": "m049", "name": "Explosion Burst", "power": 75, "accuracy": 1.0},
            {
                "id": "m050",
                "name": "Stun Grenade",
                "power": 40,
                "accuracy": 0.9,
                "effect": "accuracy_down",
                "value": 1,
            },
            # Ignores 20% of defense
            {"id": "m051", "name": "AP Shot", "power": 90, "accuracy": 0.95, "effect": "defense_ignore", "value": 0.2},
            {"id": "m052", "name": "Howitzer Impact", "power": 140, "accuracy": 0.9, "recoil_damage": 30},
        ],
    },
    "p014": {
        "id": "p014",
        "name": "Edward Elric",
        "sprite": "EdwardElric.png",
        "hp": 90,
        "attack": 95,
        "defense": 95,
        "moves": [
            {"id": "m053", "name": "Alchemy Spear", "power": 70, "accuracy": 1.0},
            {"id": "m054", "name": "Fortify", "power": 0, "accuracy": 1.0, "effect": "defense_up", "value": 2},
            {"id": "m055", "name": "Automail Blade", "power": 85, "accuracy": 0.95, "high_crit_chance": True},
            {
                "id": "m056",
                "name": "Deconstruction",
                "power": 60,
                "accuracy": 1.0,
                "effect": "enemy_defense_down",
                "value": 1,
            },
        ],
    },
}
