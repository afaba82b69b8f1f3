"""
pokedex_tables – Static Gen 1-3 species reference tables.

Raw source rows only; ``adapters.pokedex_adapter`` turns them into
``SpeciesRecord`` objects.  Evolution methods and requirements are kept in
their source spelling (``TRADE_ITEM``, ``LEVEL_SILCOON`` ...) and normalized
at load time.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple, Union

NATIONAL_DEX_SIZE = 386

# ── Species ──────────────────────────────────────────────────────────────────
# (dex, name, types, (hp, atk, def, sp_atk, sp_def, speed), abilities)

SPECIES_ROWS: Tuple[tuple, ...] = (
    (1, "Bulbasaur", ("Grass", "Poison"), (45, 49, 49, 65, 65, 45), ("Overgrow",)),
    (2, "Ivysaur", ("Grass", "Poison"), (60, 62, 63, 80, 80, 60), ("Overgrow",)),
    (3, "Venusaur", ("Grass", "Poison"), (80, 82, 83, 100, 100, 80), ("Overgrow",)),
    (4, "Charmander", ("Fire",), (39, 52, 43, 60, 50, 65), ("Blaze",)),
    (5, "Charmeleon", ("Fire",), (58, 64, 58, 80, 65, 80), ("Blaze",)),
    (6, "Charizard", ("Fire", "Flying"), (78, 84, 78, 109, 85, 100), ("Blaze",)),
    (7, "Squirtle", ("Water",), (44, 48, 65, 50, 64, 43), ("Torrent",)),
    (8, "Wartortle", ("Water",), (59, 63, 80, 65, 80, 58), ("Torrent",)),
    (9, "Blastoise", ("Water",), (79, 83, 100, 85, 105, 78), ("Torrent",)),
    (10, "Caterpie", ("Bug",), (45, 30, 35, 20, 20, 45), ("Shield Dust",)),
    (11, "Metapod", ("Bug",), (50, 20, 55, 25, 25, 30), ("Shed Skin",)),
    (12, "Butterfree", ("Bug", "Flying"), (60, 45, 50, 80, 80, 70), ("Compound Eyes",)),
    (13, "Weedle", ("Bug", "Poison"), (40, 35, 30, 20, 20, 50), ("Shield Dust",)),
    (14, "Kakuna", ("Bug", "Poison"), (45, 25, 50, 25, 25, 35), ("Shed Skin",)),
    (15, "Beedrill", ("Bug", "Poison"), (65, 80, 40, 45, 80, 75), ("Swarm",)),
    (16, "Pidgey", ("Normal", "Flying"), (40, 45, 40, 35, 35, 56), ("Keen Eye",)),
    (17, "Pidgeotto", ("Normal", "Flying"), (63, 60, 55, 50, 50, 71), ("Keen Eye",)),
    (18, "Pidgeot", ("Normal", "Flying"), (83, 80, 75, 70, 70, 91), ("Keen Eye",)),
    (19, "Rattata", ("Normal",), (30, 56, 35, 25, 35, 72), ("Run Away", "Guts")),
    (20, "Raticate", ("Normal",), (55, 81, 60, 50, 70, 97), ("Run Away", "Guts")),
    (21, "Spearow", ("Normal", "Flying"), (40, 60, 30, 31, 31, 70), ("Keen Eye",)),
    (22, "Fearow", ("Normal", "Flying"), (65, 90, 65, 61, 61, 100), ("Keen Eye",)),
    (23, "Ekans", ("Poison",), (35, 60, 44, 40, 54, 55), ("Intimidate", "Shed Skin")),
    (24, "Arbok", ("Poison",), (60, 85, 69, 65, 79, 80), ("Intimidate", "Shed Skin")),
    (25, "Pikachu", ("Electric",), (35, 55, 30, 50, 40, 90), ("Static",)),
    (26, "Raichu", ("Electric",), (60, 90, 55, 90, 80, 100), ("Static",)),
    (27, "Sandshrew", ("Ground",), (50, 75, 85, 20, 30, 40), ("Sand Veil",)),
    (28, "Sandslash", ("Ground",), (75, 100, 110, 45, 55, 65), ("Sand Veil",)),
    (29, "Nidoran♀", ("Poison",), (55, 47, 52, 40, 40, 41), ("Poison Point",)),
    (30, "Nidorina", ("Poison",), (70, 62, 67, 55, 55, 56), ("Poison Point",)),
    (31, "Nidoqueen", ("Poison", "Ground"), (90, 82, 87, 75, 85, 76), ("Poison Point",)),
    (32, "Nidoran♂", ("Poison",), (46, 57, 40, 40, 40, 50), ("Poison Point",)),
    (33, "Nidorino", ("Poison",), (61, 72, 57, 55, 55, 65), ("Poison Point",)),
    (34, "Nidoking", ("Poison", "Ground"), (81, 92, 77, 85, 75, 85), ("Poison Point",)),
    (35, "Clefairy", ("Normal",), (70, 45, 48, 60, 65, 35), ("Cute Charm",)),
    (36, "Clefable", ("Normal",), (95, 70, 73, 85, 90, 60), ("Cute Charm",)),
    (37, "Vulpix", ("Fire",), (38, 41, 40, 50, 65, 65), ("Flash Fire",)),
    (38, "Ninetales", ("Fire",), (73, 76, 75, 81, 100, 100), ("Flash Fire",)),
    (39, "Jigglypuff", ("Normal",), (115, 45, 20, 45, 25, 20), ("Cute Charm",)),
    (40, "Wigglytuff", ("Normal",), (140, 70, 45, 75, 50, 45), ("Cute Charm",)),
    (41, "Zubat", ("Poison", "Flying"), (40, 45, 35, 30, 40, 55), ("Inner Focus",)),
    (42, "Golbat", ("Poison", "Flying"), (75, 80, 70, 65, 75, 90), ("Inner Focus",)),
    (43, "Oddish", ("Grass", "Poison"), (45, 50, 55, 75, 65, 30), ("Chlorophyll",)),
    (44, "Gloom", ("Grass", "Poison"), (60, 65, 70, 85, 75, 40), ("Chlorophyll",)),
    (45, "Vileplume", ("Grass", "Poison"), (75, 80, 85, 100, 90, 50), ("Chlorophyll",)),
    (46, "Paras", ("Bug", "Grass"), (35, 70, 55, 45, 55, 25), ("Effect Spore",)),
    (47, "Parasect", ("Bug", "Grass"), (60, 95, 80, 60, 80, 30), ("Effect Spore",)),
    (48, "Venonat", ("Bug", "Poison"), (60, 55, 50, 40, 55, 45), ("Compound Eyes",)),
    (49, "Venomoth", ("Bug", "Poison"), (70, 65, 60, 90, 75, 90), ("Shield Dust",)),
    (50, "Diglett", ("Ground",), (10, 55, 25, 35, 45, 95), ("Sand Veil", "Arena Trap")),
    (51, "Dugtrio", ("Ground",), (35, 80, 50, 50, 70, 120), ("Sand Veil", "Arena Trap")),
    (52, "Meowth", ("Normal",), (40, 45, 35, 40, 40, 90), ("Pickup",)),
    (53, "Persian", ("Normal",), (65, 70, 60, 65, 65, 115), ("Limber",)),
    (54, "Psyduck", ("Water",), (50, 52, 48, 65, 50, 55), ("Damp", "Cloud Nine")),
    (55, "Golduck", ("Water",), (80, 82, 78, 95, 80, 85), ("Damp", "Cloud Nine")),
    (56, "Mankey", ("Fighting",), (40, 80, 35, 35, 45, 70), ("Vital Spirit",)),
    (57, "Primeape", ("Fighting",), (65, 105, 60, 60, 70, 95), ("Vital Spirit",)),
    (58, "Growlithe", ("Fire",), (55, 70, 45, 70, 50, 60), ("Intimidate", "Flash Fire")),
    (59, "Arcanine", ("Fire",), (90, 110, 80, 100, 80, 95), ("Intimidate", "Flash Fire")),
    (60, "Poliwag", ("Water",), (40, 50, 40, 40, 40, 90), ("Water Absorb", "Damp")),
    (61, "Poliwhirl", ("Water",), (65, 65, 65, 50, 50, 90), ("Water Absorb", "Damp")),
    (62, "Poliwrath", ("Water", "Fighting"), (90, 85, 95, 70, 90, 70), ("Water Absorb", "Damp")),
    (63, "Abra", ("Psychic",), (25, 20, 15, 105, 55, 90), ("Synchronize", "Inner Focus")),
    (64, "Kadabra", ("Psychic",), (40, 35, 30, 120, 70, 105), ("Synchronize", "Inner Focus")),
    (65, "Alakazam", ("Psychic",), (55, 50, 45, 135, 85, 120), ("Synchronize", "Inner Focus")),
    (66, "Machop", ("Fighting",), (70, 80, 50, 35, 35, 35), ("Guts",)),
    (67, "Machoke", ("Fighting",), (80, 100, 70, 50, 60, 45), ("Guts",)),
    (68, "Machamp", ("Fighting",), (90, 130, 80, 65, 85, 55), ("Guts",)),
    (69, "Bellsprout", ("Grass", "Poison"), (50, 75, 35, 70, 30, 40), ("Chlorophyll",)),
    (70, "Weepinbell", ("Grass", "Poison"), (65, 90, 50, 85, 45, 55), ("Chlorophyll",)),
    (71, "Victreebel", ("Grass", "Poison"), (80, 105, 65, 100, 60, 70), ("Chlorophyll",)),
    (72, "Tentacool", ("Water", "Poison"), (40, 40, 35, 50, 100, 70), ("Clear Body", "Liquid Ooze")),
    (73, "Tentacruel", ("Water", "Poison"), (80, 70, 65, 80, 120, 100), ("Clear Body", "Liquid Ooze")),
    (74, "Geodude", ("Rock", "Ground"), (40, 80, 100, 30, 30, 20), ("Rock Head", "Sturdy")),
    (75, "Graveler", ("Rock", "Ground"), (55, 95, 115, 45, 45, 35), ("Rock Head", "Sturdy")),
    (76, "Golem", ("Rock", "Ground"), (80, 110, 130, 55, 65, 45), ("Rock Head", "Sturdy")),
    (77, "Ponyta", ("Fire",), (50, 85, 55, 65, 65, 90), ("Run Away", "Flash Fire")),
    (78, "Rapidash", ("Fire",), (65, 100, 70, 80, 80, 105), ("Run Away", "Flash Fire")),
    (79, "Slowpoke", ("Water", "Psychic"), (90, 65, 65, 40, 40, 15), ("Oblivious", "Own Tempo")),
    (80, "Slowbro", ("Water", "Psychic"), (95, 75, 110, 100, 80, 30), ("Oblivious", "Own Tempo")),
    (81, "Magnemite", ("Electric", "Steel"), (25, 35, 70, 95, 55, 45), ("Magnet Pull", "Sturdy")),
    (82, "Magneton", ("Electric", "Steel"), (50, 60, 95, 120, 70, 70), ("Magnet Pull", "Sturdy")),
    (83, "Farfetch'd", ("Normal", "Flying"), (52, 65, 55, 58, 62, 60), ("Keen Eye", "Inner Focus")),
    (84, "Doduo", ("Normal", "Flying"), (35, 85, 45, 35, 35, 75), ("Run Away", "Early Bird")),
    (85, "Dodrio", ("Normal", "Flying"), (60, 110, 70, 60, 60, 100), ("Run Away", "Early Bird")),
    (86, "Seel", ("Water",), (65, 45, 55, 45, 70, 45), ("Thick Fat",)),
    (87, "Dewgong", ("Water", "Ice"), (90, 70, 80, 70, 95, 70), ("Thick Fat",)),
    (88, "Grimer", ("Poison",), (80, 80, 50, 40, 50, 25), ("Stench", "Sticky Hold")),
    (89, "Muk", ("Poison",), (105, 105, 75, 65, 100, 50), ("Stench", "Sticky Hold")),
    (90, "Shellder", ("Water",), (30, 65, 100, 45, 25, 40), ("Shell Armor",)),
    (91, "Cloyster", ("Water", "Ice"), (50, 95, 180, 85, 45, 70), ("Shell Armor",)),
    (92, "Gastly", ("Ghost", "Poison"), (30, 35, 30, 100, 35, 80), ("Levitate",)),
    (93, "Haunter", ("Ghost", "Poison"), (45, 50, 45, 115, 55, 95), ("Levitate",)),
    (94, "Gengar", ("Ghost", "Poison"), (60, 65, 60, 130, 75, 110), ("Levitate",)),
    (95, "Onix", ("Rock", "Ground"), (35, 45, 160, 30, 45, 70), ("Rock Head", "Sturdy")),
    (96, "Drowzee", ("Psychic",), (60, 48, 45, 43, 90, 42), ("Insomnia",)),
    (97, "Hypno", ("Psychic",), (85, 73, 70, 73, 115, 67), ("Insomnia",)),
    (98, "Krabby", ("Water",), (30, 105, 90, 25, 25, 50), ("Hyper Cutter", "Shell Armor")),
    (99, "Kingler", ("Water",), (55, 130, 115, 50, 50, 75), ("Hyper Cutter", "Shell Armor")),
    (100, "Voltorb", ("Electric",), (40, 30, 50, 55, 55, 100), ("Soundproof", "Static")),
    (101, "Electrode", ("Electric",), (60, 50, 70, 80, 80, 140), ("Soundproof", "Static")),
    (102, "Exeggcute", ("Grass", "Psychic"), (60, 40, 80, 60, 45, 40), ("Chlorophyll",)),
    (103, "Exeggutor", ("Grass", "Psychic"), (95, 95, 85, 125, 65, 55), ("Chlorophyll",)),
    (104, "Cubone", ("Ground",), (50, 50, 95, 40, 50, 35), ("Rock Head", "Lightning Rod")),
    (105, "Marowak", ("Ground",), (60, 80, 110, 50, 80, 45), ("Rock Head", "Lightning Rod")),
    (106, "Hitmonlee", ("Fighting",), (50, 120, 53, 35, 110, 87), ("Limber",)),
    (107, "Hitmonchan", ("Fighting",), (50, 105, 79, 35, 110, 76), ("Keen Eye",)),
    (108, "Lickitung", ("Normal",), (90, 55, 75, 60, 75, 30), ("Own Tempo", "Oblivious")),
    (109, "Koffing", ("Poison",), (40, 65, 95, 60, 45, 35), ("Levitate",)),
    (110, "Weezing", ("Poison",), (65, 90, 120, 85, 70, 60), ("Levitate",)),
    (111, "Rhyhorn", ("Ground", "Rock"), (80, 85, 95, 30, 30, 25), ("Lightning Rod", "Rock Head")),
    (112, "Rhydon", ("Ground", "Rock"), (105, 130, 120, 45, 45, 40), ("Lightning Rod", "Rock Head")),
    (113, "Chansey", ("Normal",), (250, 5, 5, 35, 105, 50), ("Natural Cure", "Serene Grace")),
    (114, "Tangela", ("Grass",), (65, 55, 115, 100, 40, 60), ("Chlorophyll",)),
    (115, "Kangaskhan", ("Normal",), (105, 95, 80, 40, 80, 90), ("Early Bird",)),
    (116, "Horsea", ("Water",), (30, 40, 70, 70, 25, 60), ("Swift Swim",)),
    (117, "Seadra", ("Water",), (55, 65, 95, 95, 45, 85), ("Poison Point",)),
    (118, "Goldeen", ("Water",), (45, 67, 60, 35, 50, 63), ("Swift Swim", "Water Veil")),
    (119, "Seaking", ("Water",), (80, 92, 65, 65, 80, 68), ("Swift Swim", "Water Veil")),
    (120, "Staryu", ("Water",), (30, 45, 55, 70, 55, 85), ("Illuminate", "Natural Cure")),
    (121, "Starmie", ("Water", "Psychic"), (60, 75, 85, 100, 85, 115), ("Illuminate", "Natural Cure")),
    (122, "Mr. Mime", ("Psychic",), (40, 45, 65, 100, 120, 90), ("Soundproof",)),
    (123, "Scyther", ("Bug", "Flying"), (70, 110, 80, 55, 80, 105), ("Swarm",)),
    (124, "Jynx", ("Ice", "Psychic"), (65, 50, 35, 115, 95, 95), ("Oblivious",)),
    (125, "Electabuzz", ("Electric",), (65, 83, 57, 95, 85, 105), ("Static",)),
    (126, "Magmar", ("Fire",), (65, 95, 57, 100, 85, 93), ("Flame Body",)),
    (127, "Pinsir", ("Bug",), (65, 125, 100, 55, 70, 85), ("Hyper Cutter",)),
    (128, "Tauros", ("Normal",), (75, 100, 95, 40, 70, 110), ("Intimidate",)),
    (129, "Magikarp", ("Water",), (20, 10, 55, 15, 20, 80), ("Swift Swim",)),
    (130, "Gyarados", ("Water", "Flying"), (95, 125, 79, 60, 100, 81), ("Intimidate",)),
    (131, "Lapras", ("Water", "Ice"), (130, 85, 80, 85, 95, 60), ("Water Absorb", "Shell Armor")),
    (132, "Ditto", ("Normal",), (48, 48, 48, 48, 48, 48), ("Limber",)),
    (133, "Eevee", ("Normal",), (55, 55, 50, 45, 65, 55), ("Run Away",)),
    (134, "Vaporeon", ("Water",), (130, 65, 60, 110, 95, 65), ("Water Absorb",)),
    (135, "Jolteon", ("Electric",), (65, 65, 60, 110, 95, 130), ("Volt Absorb",)),
    (136, "Flareon", ("Fire",), (65, 130, 60, 95, 110, 65), ("Flash Fire",)),
    (137, "Porygon", ("Normal",), (65, 60, 70, 85, 75, 40), ("Trace",)),
    (138, "Omanyte", ("Rock", "Water"), (35, 40, 100, 90, 55, 35), ("Swift Swim", "Shell Armor")),
    (139, "Omastar", ("Rock", "Water"), (70, 60, 125, 115, 70, 55), ("Swift Swim", "Shell Armor")),
    (140, "Kabuto", ("Rock", "Water"), (30, 80, 90, 55, 45, 55), ("Swift Swim", "Battle Armor")),
    (141, "Kabutops", ("Rock", "Water"), (60, 115, 105, 65, 70, 80), ("Swift Swim", "Battle Armor")),
    (142, "Aerodactyl", ("Rock", "Flying"), (80, 105, 65, 60, 75, 130), ("Rock Head", "Pressure")),
    (143, "Snorlax", ("Normal",), (160, 110, 65, 65, 110, 30), ("Immunity", "Thick Fat")),
    (144, "Articuno", ("Ice", "Flying"), (90, 85, 100, 95, 125, 85), ("Pressure",)),
    (145, "Zapdos", ("Electric", "Flying"), (90, 90, 85, 125, 90, 100), ("Pressure",)),
    (146, "Moltres", ("Fire", "Flying"), (90, 100, 90, 125, 85, 90), ("Pressure",)),
    (147, "Dratini", ("Dragon",), (41, 64, 45, 50, 50, 50), ("Shed Skin",)),
    (148, "Dragonair", ("Dragon",), (61, 84, 65, 70, 70, 70), ("Shed Skin",)),
    (149, "Dragonite", ("Dragon", "Flying"), (91, 134, 95, 100, 100, 80), ("Inner Focus",)),
    (150, "Mewtwo", ("Psychic",), (106, 110, 90, 154, 90, 130), ("Pressure",)),
    (151, "Mew", ("Psychic",), (100, 100, 100, 100, 100, 100), ("Synchronize",)),
    (152, "Chikorita", ("Grass",), (45, 49, 65, 49, 65, 45), ("Overgrow",)),
    (153, "Bayleef", ("Grass",), (60, 62, 80, 63, 80, 60), ("Overgrow",)),
    (154, "Meganium", ("Grass",), (80, 82, 100, 83, 100, 80), ("Overgrow",)),
    (155, "Cyndaquil", ("Fire",), (39, 52, 43, 60, 50, 65), ("Blaze",)),
    (156, "Quilava", ("Fire",), (58, 64, 58, 80, 65, 80), ("Blaze",)),
    (157, "Typhlosion", ("Fire",), (78, 84, 78, 109, 85, 100), ("Blaze",)),
    (158, "Totodile", ("Water",), (50, 65, 64, 44, 48, 43), ("Torrent",)),
    (159, "Croconaw", ("Water",), (65, 80, 80, 59, 63, 58), ("Torrent",)),
    (160, "Feraligatr", ("Water",), (85, 105, 100, 79, 83, 78), ("Torrent",)),
    (161, "Sentret", ("Normal",), (35, 46, 34, 35, 45, 20), ("Run Away", "Keen Eye")),
    (162, "Furret", ("Normal",), (85, 76, 64, 45, 55, 90), ("Run Away", "Keen Eye")),
    (163, "Hoothoot", ("Normal", "Flying"), (60, 30, 30, 36, 56, 50), ("Insomnia", "Keen Eye")),
    (164, "Noctowl", ("Normal", "Flying"), (100, 50, 50, 76, 96, 70), ("Insomnia", "Keen Eye")),
    (165, "Ledyba", ("Bug", "Flying"), (40, 20, 30, 40, 80, 55), ("Swarm", "Early Bird")),
    (166, "Ledian", ("Bug", "Flying"), (55, 35, 50, 55, 110, 85), ("Swarm", "Early Bird")),
    (167, "Spinarak", ("Bug", "Poison"), (40, 60, 40, 40, 40, 30), ("Swarm", "Insomnia")),
    (168, "Ariados", ("Bug", "Poison"), (70, 90, 70, 60, 60, 40), ("Swarm", "Insomnia")),
    (169, "Crobat", ("Poison", "Flying"), (85, 90, 80, 70, 80, 130), ("Inner Focus",)),
    (170, "Chinchou", ("Water", "Electric"), (75, 38, 38, 56, 56, 67), ("Volt Absorb", "Illuminate")),
    (171, "Lanturn", ("Water", "Electric"), (125, 58, 58, 76, 76, 67), ("Volt Absorb", "Illuminate")),
    (172, "Pichu", ("Electric",), (20, 40, 15, 35, 35, 60), ("Static",)),
    (173, "Cleffa", ("Normal",), (50, 25, 28, 45, 55, 15), ("Cute Charm",)),
    (174, "Igglybuff", ("Normal",), (90, 30, 15, 40, 20, 15), ("Cute Charm",)),
    (175, "Togepi", ("Normal",), (35, 20, 65, 40, 65, 20), ("Hustle", "Serene Grace")),
    (176, "Togetic", ("Normal", "Flying"), (55, 40, 85, 80, 105, 40), ("Hustle", "Serene Grace")),
    (177, "Natu", ("Psychic", "Flying"), (40, 50, 45, 70, 45, 70), ("Synchronize", "Early Bird")),
    (178, "Xatu", ("Psychic", "Flying"), (65, 75, 70, 95, 70, 95), ("Synchronize", "Early Bird")),
    (179, "Mareep", ("Electric",), (55, 40, 40, 65, 45, 35), ("Static",)),
    (180, "Flaaffy", ("Electric",), (70, 55, 55, 80, 60, 45), ("Static",)),
    (181, "Ampharos", ("Electric",), (90, 75, 75, 115, 90, 55), ("Static",)),
    (182, "Bellossom", ("Grass",), (75, 80, 85, 90, 100, 50), ("Chlorophyll",)),
    (183, "Marill", ("Water",), (70, 20, 50, 20, 50, 40), ("Thick Fat", "Huge Power")),
    (184, "Azumarill", ("Water",), (100, 50, 80, 50, 80, 50), ("Thick Fat", "Huge Power")),
    (185, "Sudowoodo", ("Rock",), (70, 100, 115, 30, 65, 30), ("Sturdy", "Rock Head")),
    (186, "Politoed", ("Water",), (90, 75, 75, 90, 100, 70), ("Water Absorb", "Damp")),
    (187, "Hoppip", ("Grass", "Flying"), (35, 35, 40, 35, 55, 50), ("Chlorophyll",)),
    (188, "Skiploom", ("Grass", "Flying"), (55, 45, 50, 45, 65, 80), ("Chlorophyll",)),
    (189, "Jumpluff", ("Grass", "Flying"), (75, 55, 70, 55, 85, 110), ("Chlorophyll",)),
    (190, "Aipom", ("Normal",), (55, 70, 55, 40, 55, 85), ("Run Away", "Pickup")),
    (191, "Sunkern", ("Grass",), (30, 30, 30, 30, 30, 30), ("Chlorophyll",)),
    (192, "Sunflora", ("Grass",), (75, 75, 55, 105, 85, 30), ("Chlorophyll",)),
    (193, "Yanma", ("Bug", "Flying"), (65, 65, 45, 75, 45, 95), ("Speed Boost", "Compound Eyes")),
    (194, "Wooper", ("Water", "Ground"), (55, 45, 45, 25, 25, 15), ("Damp", "Water Absorb")),
    (195, "Quagsire", ("Water", "Ground"), (95, 85, 85, 65, 65, 35), ("Damp", "Water Absorb")),
    (196, "Espeon", ("Psychic",), (65, 65, 60, 130, 95, 110), ("Synchronize",)),
    (197, "Umbreon", ("Dark",), (95, 65, 110, 60, 130, 65), ("Synchronize",)),
    (198, "Murkrow", ("Dark", "Flying"), (60, 85, 42, 85, 42, 91), ("Insomnia",)),
    (199, "Slowking", ("Water", "Psychic"), (95, 75, 80, 100, 110, 30), ("Oblivious", "Own Tempo")),
    (200, "Misdreavus", ("Ghost",), (60, 60, 60, 85, 85, 85), ("Levitate",)),
    (201, "Unown", ("Psychic",), (48, 72, 48, 72, 48, 48), ("Levitate",)),
    (202, "Wobbuffet", ("Psychic",), (190, 33, 58, 33, 58, 33), ("Shadow Tag",)),
    (203, "Girafarig", ("Normal", "Psychic"), (70, 80, 65, 90, 65, 85), ("Inner Focus", "Early Bird")),
    (204, "Pineco", ("Bug",), (50, 65, 90, 35, 35, 15), ("Sturdy",)),
    (205, "Forretress", ("Bug", "Steel"), (75, 90, 140, 60, 60, 40), ("Sturdy",)),
    (206, "Dunsparce", ("Normal",), (100, 70, 70, 65, 65, 45), ("Serene Grace", "Run Away")),
    (207, "Gligar", ("Ground", "Flying"), (65, 75, 105, 35, 65, 85), ("Hyper Cutter", "Sand Veil")),
    (208, "Steelix", ("Steel", "Ground"), (75, 85, 200, 55, 65, 30), ("Rock Head", "Sturdy")),
    (209, "Snubbull", ("Normal",), (60, 80, 50, 40, 40, 30), ("Intimidate", "Run Away")),
    (210, "Granbull", ("Normal",), (90, 120, 75, 60, 60, 45), ("Intimidate",)),
    (211, "Qwilfish", ("Water", "Poison"), (65, 95, 75, 55, 55, 85), ("Poison Point", "Swift Swim")),
    (212, "Scizor", ("Bug", "Steel"), (70, 130, 100, 55, 80, 65), ("Swarm",)),
    (213, "Shuckle", ("Bug", "Rock"), (20, 10, 230, 10, 230, 5), ("Sturdy",)),
    (214, "Heracross", ("Bug", "Fighting"), (80, 125, 75, 40, 95, 85), ("Swarm", "Guts")),
    (215, "Sneasel", ("Dark", "Ice"), (55, 95, 55, 35, 75, 115), ("Inner Focus", "Keen Eye")),
    (216, "Teddiursa", ("Normal",), (60, 80, 50, 50, 50, 40), ("Pickup",)),
    (217, "Ursaring", ("Normal",), (90, 130, 75, 75, 75, 55), ("Guts",)),
    (218, "Slugma", ("Fire",), (40, 40, 40, 70, 40, 20), ("Magma Armor", "Flame Body")),
    (219, "Magcargo", ("Fire", "Rock"), (50, 50, 120, 80, 80, 30), ("Magma Armor", "Flame Body")),
    (220, "Swinub", ("Ice", "Ground"), (50, 50, 40, 30, 30, 50), ("Oblivious",)),
    (221, "Piloswine", ("Ice", "Ground"), (100, 100, 80, 60, 60, 50), ("Oblivious",)),
    (222, "Corsola", ("Water", "Rock"), (55, 55, 85, 65, 85, 35), ("Hustle", "Natural Cure")),
    (223, "Remoraid", ("Water",), (35, 65, 35, 65, 35, 65), ("Hustle",)),
    (224, "Octillery", ("Water",), (75, 105, 75, 105, 75, 45), ("Suction Cups",)),
    (225, "Delibird", ("Ice", "Flying"), (45, 55, 45, 65, 45, 75), ("Vital Spirit", "Hustle")),
    (226, "Mantine", ("Water", "Flying"), (65, 40, 70, 80, 140, 70), ("Swift Swim", "Water Absorb")),
    (227, "Skarmory", ("Steel", "Flying"), (65, 80, 140, 40, 70, 70), ("Keen Eye", "Sturdy")),
    (228, "Houndour", ("Dark", "Fire"), (45, 60, 30, 80, 50, 65), ("Early Bird", "Flash Fire")),
    (229, "Houndoom", ("Dark", "Fire"), (75, 90, 50, 110, 80, 95), ("Early Bird", "Flash Fire")),
    (230, "Kingdra", ("Water", "Dragon"), (75, 95, 95, 95, 95, 85), ("Swift Swim",)),
    (231, "Phanpy", ("Ground",), (90, 60, 60, 40, 40, 40), ("Pickup",)),
    (232, "Donphan", ("Ground",), (90, 120, 120, 60, 60, 50), ("Sturdy",)),
    (233, "Porygon2", ("Normal",), (85, 80, 90, 105, 95, 60), ("Trace",)),
    (234, "Stantler", ("Normal",), (73, 95, 62, 85, 65, 85), ("Intimidate",)),
    (235, "Smeargle", ("Normal",), (55, 20, 35, 20, 45, 75), ("Own Tempo",)),
    (236, "Tyrogue", ("Fighting",), (35, 35, 35, 35, 35, 35), ("Guts",)),
    (237, "Hitmontop", ("Fighting",), (50, 95, 95, 35, 110, 70), ("Intimidate",)),
    (238, "Smoochum", ("Ice", "Psychic"), (45, 30, 15, 85, 65, 65), ("Oblivious",)),
    (239, "Elekid", ("Electric",), (45, 63, 37, 65, 55, 95), ("Static",)),
    (240, "Magby", ("Fire",), (45, 75, 37, 70, 55, 83), ("Flame Body",)),
    (241, "Miltank", ("Normal",), (95, 80, 105, 40, 70, 100), ("Thick Fat",)),
    (242, "Blissey", ("Normal",), (255, 10, 10, 75, 135, 55), ("Natural Cure", "Serene Grace")),
    (243, "Raikou", ("Electric",), (90, 85, 75, 115, 100, 115), ("Pressure",)),
    (244, "Entei", ("Fire",), (115, 115, 85, 90, 75, 100), ("Pressure",)),
    (245, "Suicune", ("Water",), (100, 75, 115, 90, 115, 85), ("Pressure",)),
    (246, "Larvitar", ("Rock", "Ground"), (50, 64, 50, 45, 50, 41), ("Guts",)),
    (247, "Pupitar", ("Rock", "Ground"), (70, 84, 70, 65, 70, 51), ("Shed Skin",)),
    (248, "Tyranitar", ("Rock", "Dark"), (100, 134, 110, 95, 100, 61), ("Sand Stream",)),
    (249, "Lugia", ("Psychic", "Flying"), (106, 90, 130, 90, 154, 110), ("Pressure",)),
    (250, "Ho-Oh", ("Fire", "Flying"), (106, 130, 90, 110, 154, 90), ("Pressure",)),
    (251, "Celebi", ("Psychic", "Grass"), (100, 100, 100, 100, 100, 100), ("Natural Cure",)),
    (252, "Treecko", ("Grass",), (40, 45, 35, 65, 55, 70), ("Overgrow",)),
    (253, "Grovyle", ("Grass",), (50, 65, 45, 85, 65, 95), ("Overgrow",)),
    (254, "Sceptile", ("Grass",), (70, 85, 65, 105, 85, 120), ("Overgrow",)),
    (255, "Torchic", ("Fire",), (45, 60, 40, 70, 50, 45), ("Blaze",)),
    (256, "Combusken", ("Fire", "Fighting"), (60, 85, 60, 85, 60, 55), ("Blaze",)),
    (257, "Blaziken", ("Fire", "Fighting"), (80, 120, 70, 110, 70, 80), ("Blaze",)),
    (258, "Mudkip", ("Water",), (50, 70, 50, 50, 50, 40), ("Torrent",)),
    (259, "Marshtomp", ("Water", "Ground"), (70, 85, 70, 60, 70, 50), ("Torrent",)),
    (260, "Swampert", ("Water", "Ground"), (100, 110, 90, 85, 90, 60), ("Torrent",)),
    (261, "Poochyena", ("Dark",), (35, 55, 35, 30, 30, 35), ("Run Away",)),
    (262, "Mightyena", ("Dark",), (70, 90, 70, 60, 60, 70), ("Intimidate",)),
    (263, "Zigzagoon", ("Normal",), (38, 30, 41, 30, 41, 60), ("Pickup",)),
    (264, "Linoone", ("Normal",), (78, 70, 61, 50, 61, 100), ("Pickup",)),
    (265, "Wurmple", ("Bug",), (45, 45, 35, 20, 30, 20), ("Shield Dust",)),
    (266, "Silcoon", ("Bug",), (50, 35, 55, 25, 25, 15), ("Shed Skin",)),
    (267, "Beautifly", ("Bug", "Flying"), (60, 70, 50, 90, 50, 65), ("Swarm",)),
    (268, "Cascoon", ("Bug",), (50, 35, 55, 25, 25, 15), ("Shed Skin",)),
    (269, "Dustox", ("Bug", "Poison"), (60, 50, 70, 50, 90, 65), ("Shield Dust",)),
    (270, "Lotad", ("Water", "Grass"), (40, 30, 30, 40, 50, 30), ("Swift Swim", "Rain Dish")),
    (271, "Lombre", ("Water", "Grass"), (60, 50, 50, 60, 70, 50), ("Swift Swim", "Rain Dish")),
    (272, "Ludicolo", ("Water", "Grass"), (80, 70, 70, 90, 100, 70), ("Swift Swim", "Rain Dish")),
    (273, "Seedot", ("Grass",), (40, 40, 50, 30, 30, 30), ("Chlorophyll", "Early Bird")),
    (274, "Nuzleaf", ("Grass", "Dark"), (70, 70, 40, 60, 40, 60), ("Chlorophyll", "Early Bird")),
    (275, "Shiftry", ("Grass", "Dark"), (90, 100, 60, 90, 60, 80), ("Chlorophyll", "Early Bird")),
    (276, "Taillow", ("Normal", "Flying"), (40, 55, 30, 30, 30, 85), ("Guts",)),
    (277, "Swellow", ("Normal", "Flying"), (60, 85, 60, 50, 50, 125), ("Guts",)),
    (278, "Wingull", ("Water", "Flying"), (40, 30, 30, 55, 30, 85), ("Keen Eye",)),
    (279, "Pelipper", ("Water", "Flying"), (60, 50, 100, 85, 70, 65), ("Keen Eye",)),
    (280, "Ralts", ("Psychic",), (28, 25, 25, 45, 35, 40), ("Synchronize", "Trace")),
    (281, "Kirlia", ("Psychic",), (38, 35, 35, 65, 55, 50), ("Synchronize", "Trace")),
    (282, "Gardevoir", ("Psychic",), (68, 65, 65, 125, 115, 80), ("Synchronize", "Trace")),
    (283, "Surskit", ("Bug", "Water"), (40, 30, 32, 50, 52, 65), ("Swift Swim",)),
    (284, "Masquerain", ("Bug", "Flying"), (70, 60, 62, 80, 82, 60), ("Intimidate",)),
    (285, "Shroomish", ("Grass",), (60, 40, 60, 40, 60, 35), ("Effect Spore",)),
    (286, "Breloom", ("Grass", "Fighting"), (60, 130, 80, 60, 60, 70), ("Effect Spore",)),
    (287, "Slakoth", ("Normal",), (60, 60, 60, 35, 35, 30), ("Truant",)),
    (288, "Vigoroth", ("Normal",), (80, 80, 80, 55, 55, 90), ("Vital Spirit",)),
    (289, "Slaking", ("Normal",), (150, 160, 100, 95, 65, 100), ("Truant",)),
    (290, "Nincada", ("Bug", "Ground"), (31, 45, 90, 30, 30, 40), ("Compound Eyes",)),
    (291, "Ninjask", ("Bug", "Flying"), (61, 90, 45, 50, 50, 160), ("Speed Boost",)),
    (292, "Shedinja", ("Bug", "Ghost"), (1, 90, 45, 30, 30, 40), ("Wonder Guard",)),
    (293, "Whismur", ("Normal",), (64, 51, 23, 51, 23, 28), ("Soundproof",)),
    (294, "Loudred", ("Normal",), (84, 71, 43, 71, 43, 48), ("Soundproof",)),
    (295, "Exploud", ("Normal",), (104, 91, 63, 91, 63, 68), ("Soundproof",)),
    (296, "Makuhita", ("Fighting",), (72, 60, 30, 20, 30, 25), ("Thick Fat", "Guts")),
    (297, "Hariyama", ("Fighting",), (144, 120, 60, 40, 60, 50), ("Thick Fat", "Guts")),
    (298, "Azurill", ("Normal",), (50, 20, 40, 20, 40, 20), ("Thick Fat", "Huge Power")),
    (299, "Nosepass", ("Rock",), (30, 45, 135, 45, 90, 30), ("Sturdy", "Magnet Pull")),
    (300, "Skitty", ("Normal",), (50, 45, 45, 35, 35, 50), ("Cute Charm",)),
    (301, "Delcatty", ("Normal",), (70, 65, 65, 55, 55, 70), ("Cute Charm",)),
    (302, "Sableye", ("Dark", "Ghost"), (50, 75, 75, 65, 65, 50), ("Keen Eye",)),
    (303, "Mawile", ("Steel",), (50, 85, 85, 55, 55, 50), ("Hyper Cutter", "Intimidate")),
    (304, "Aron", ("Steel", "Rock"), (50, 70, 100, 40, 40, 30), ("Sturdy", "Rock Head")),
    (305, "Lairon", ("Steel", "Rock"), (60, 90, 140, 50, 50, 40), ("Sturdy", "Rock Head")),
    (306, "Aggron", ("Steel", "Rock"), (70, 110, 180, 60, 60, 50), ("Sturdy", "Rock Head")),
    (307, "Meditite", ("Fighting", "Psychic"), (30, 40, 55, 40, 55, 60), ("Pure Power",)),
    (308, "Medicham", ("Fighting", "Psychic"), (60, 60, 75, 60, 75, 80), ("Pure Power",)),
    (309, "Electrike", ("Electric",), (40, 45, 40, 65, 40, 65), ("Static", "Lightning Rod")),
    (310, "Manectric", ("Electric",), (70, 75, 60, 105, 60, 105), ("Static", "Lightning Rod")),
    (311, "Plusle", ("Electric",), (60, 50, 40, 85, 75, 95), ("Plus",)),
    (312, "Minun", ("Electric",), (60, 40, 50, 75, 85, 95), ("Minus",)),
    (313, "Volbeat", ("Bug",), (65, 73, 55, 47, 75, 85), ("Illuminate", "Swarm")),
    (314, "Illumise", ("Bug",), (65, 47, 55, 73, 75, 85), ("Oblivious",)),
    (315, "Roselia", ("Grass", "Poison"), (50, 60, 45, 100, 80, 65), ("Natural Cure", "Poison Point")),
    (316, "Gulpin", ("Poison",), (70, 43, 53, 43, 53, 40), ("Liquid Ooze", "Sticky Hold")),
    (317, "Swalot", ("Poison",), (100, 73, 83, 73, 83, 55), ("Liquid Ooze", "Sticky Hold")),
    (318, "Carvanha", ("Water", "Dark"), (45, 90, 20, 65, 20, 65), ("Rough Skin",)),
    (319, "Sharpedo", ("Water", "Dark"), (70, 120, 40, 95, 40, 95), ("Rough Skin",)),
    (320, "Wailmer", ("Water",), (130, 70, 35, 70, 35, 60), ("Water Veil", "Oblivious")),
    (321, "Wailord", ("Water",), (170, 90, 45, 90, 45, 60), ("Water Veil", "Oblivious")),
    (322, "Numel", ("Fire", "Ground"), (60, 60, 40, 65, 45, 35), ("Oblivious",)),
    (323, "Camerupt", ("Fire", "Ground"), (70, 100, 70, 105, 75, 40), ("Magma Armor",)),
    (324, "Torkoal", ("Fire",), (70, 85, 140, 85, 70, 20), ("White Smoke",)),
    (325, "Spoink", ("Psychic",), (60, 25, 35, 70, 80, 60), ("Thick Fat", "Own Tempo")),
    (326, "Grumpig", ("Psychic",), (80, 45, 65, 90, 110, 80), ("Thick Fat", "Own Tempo")),
    (327, "Spinda", ("Normal",), (60, 60, 60, 60, 60, 60), ("Own Tempo",)),
    (328, "Trapinch", ("Ground",), (45, 100, 45, 45, 45, 10), ("Hyper Cutter", "Arena Trap")),
    (329, "Vibrava", ("Ground", "Dragon"), (50, 70, 50, 50, 50, 70), ("Levitate",)),
    (330, "Flygon", ("Ground", "Dragon"), (80, 100, 80, 80, 80, 100), ("Levitate",)),
    (331, "Cacnea", ("Grass",), (50, 85, 40, 85, 40, 35), ("Sand Veil",)),
    (332, "Cacturne", ("Grass", "Dark"), (70, 115, 60, 115, 60, 55), ("Sand Veil",)),
    (333, "Swablu", ("Normal", "Flying"), (45, 40, 60, 40, 75, 50), ("Natural Cure",)),
    (334, "Altaria", ("Dragon", "Flying"), (75, 70, 90, 70, 105, 80), ("Natural Cure",)),
    (335, "Zangoose", ("Normal",), (73, 115, 60, 60, 60, 90), ("Immunity",)),
    (336, "Seviper", ("Poison",), (73, 100, 60, 100, 60, 65), ("Shed Skin",)),
    (337, "Lunatone", ("Rock", "Psychic"), (70, 55, 65, 95, 85, 70), ("Levitate",)),
    (338, "Solrock", ("Rock", "Psychic"), (70, 95, 85, 55, 65, 70), ("Levitate",)),
    (339, "Barboach", ("Water", "Ground"), (50, 48, 43, 46, 41, 60), ("Oblivious",)),
    (340, "Whiscash", ("Water", "Ground"), (110, 78, 73, 76, 71, 60), ("Oblivious",)),
    (341, "Corphish", ("Water",), (43, 80, 65, 50, 35, 35), ("Hyper Cutter", "Shell Armor")),
    (342, "Crawdaunt", ("Water", "Dark"), (63, 120, 85, 90, 55, 55), ("Hyper Cutter", "Shell Armor")),
    (343, "Baltoy", ("Ground", "Psychic"), (40, 40, 55, 40, 70, 55), ("Levitate",)),
    (344, "Claydol", ("Ground", "Psychic"), (60, 70, 105, 70, 120, 75), ("Levitate",)),
    (345, "Lileep", ("Rock", "Grass"), (66, 41, 77, 61, 87, 23), ("Suction Cups",)),
    (346, "Cradily", ("Rock", "Grass"), (86, 81, 97, 81, 107, 43), ("Suction Cups",)),
    (347, "Anorith", ("Rock", "Bug"), (45, 95, 50, 40, 50, 75), ("Battle Armor",)),
    (348, "Armaldo", ("Rock", "Bug"), (75, 125, 100, 70, 80, 45), ("Battle Armor",)),
    (349, "Feebas", ("Water",), (20, 15, 20, 10, 55, 80), ("Swift Swim",)),
    (350, "Milotic", ("Water",), (95, 60, 79, 100, 125, 81), ("Marvel Scale",)),
    (351, "Castform", ("Normal",), (70, 70, 70, 70, 70, 70), ("Forecast",)),
    (352, "Kecleon", ("Normal",), (60, 90, 70, 60, 120, 40), ("Color Change",)),
    (353, "Shuppet", ("Ghost",), (44, 75, 35, 63, 33, 45), ("Insomnia",)),
    (354, "Banette", ("Ghost",), (64, 115, 65, 83, 63, 65), ("Insomnia",)),
    (355, "Duskull", ("Ghost",), (20, 40, 90, 30, 90, 25), ("Levitate",)),
    (356, "Dusclops", ("Ghost",), (40, 70, 130, 60, 130, 25), ("Pressure",)),
    (357, "Tropius", ("Grass", "Flying"), (99, 68, 83, 72, 87, 51), ("Chlorophyll",)),
    (358, "Chimecho", ("Psychic",), (65, 50, 70, 95, 80, 65), ("Levitate",)),
    (359, "Absol", ("Dark",), (65, 130, 60, 75, 60, 75), ("Pressure",)),
    (360, "Wynaut", ("Psychic",), (95, 23, 48, 23, 48, 23), ("Shadow Tag",)),
    (361, "Snorunt", ("Ice",), (50, 50, 50, 50, 50, 50), ("Inner Focus",)),
    (362, "Glalie", ("Ice",), (80, 80, 80, 80, 80, 80), ("Inner Focus",)),
    (363, "Spheal", ("Ice", "Water"), (70, 40, 50, 55, 50, 25), ("Thick Fat",)),
    (364, "Sealeo", ("Ice", "Water"), (90, 60, 70, 75, 70, 45), ("Thick Fat",)),
    (365, "Walrein", ("Ice", "Water"), (110, 80, 90, 95, 90, 65), ("Thick Fat",)),
    (366, "Clamperl", ("Water",), (35, 64, 85, 74, 55, 32), ("Shell Armor",)),
    (367, "Huntail", ("Water",), (55, 104, 105, 94, 75, 52), ("Swift Swim",)),
    (368, "Gorebyss", ("Water",), (55, 84, 105, 114, 75, 52), ("Swift Swim",)),
    (369, "Relicanth", ("Water", "Rock"), (100, 90, 130, 45, 65, 55), ("Swift Swim", "Rock Head")),
    (370, "Luvdisc", ("Water",), (43, 30, 55, 40, 65, 97), ("Swift Swim",)),
    (371, "Bagon", ("Dragon",), (45, 75, 60, 40, 30, 50), ("Rock Head",)),
    (372, "Shelgon", ("Dragon",), (65, 95, 100, 60, 50, 50), ("Rock Head",)),
    (373, "Salamence", ("Dragon", "Flying"), (95, 135, 80, 110, 80, 100), ("Intimidate",)),
    (374, "Beldum", ("Steel", "Psychic"), (40, 55, 80, 35, 60, 30), ("Clear Body",)),
    (375, "Metang", ("Steel", "Psychic"), (60, 75, 100, 55, 80, 50), ("Clear Body",)),
    (376, "Metagross", ("Steel", "Psychic"), (80, 135, 130, 95, 90, 70), ("Clear Body",)),
    (377, "Regirock", ("Rock",), (80, 100, 200, 50, 100, 50), ("Clear Body",)),
    (378, "Regice", ("Ice",), (80, 50, 100, 100, 200, 50), ("Clear Body",)),
    (379, "Registeel", ("Steel",), (80, 75, 150, 75, 150, 50), ("Clear Body",)),
    (380, "Latias", ("Dragon", "Psychic"), (80, 80, 90, 110, 130, 110), ("Levitate",)),
    (381, "Latios", ("Dragon", "Psychic"), (80, 90, 80, 130, 110, 110), ("Levitate",)),
    (382, "Kyogre", ("Water",), (100, 100, 90, 150, 140, 90), ("Drizzle",)),
    (383, "Groudon", ("Ground",), (100, 150, 140, 100, 90, 90), ("Drought",)),
    (384, "Rayquaza", ("Dragon", "Flying"), (105, 150, 90, 150, 90, 95), ("Air Lock",)),
    (385, "Jirachi", ("Steel", "Psychic"), (100, 100, 100, 100, 100, 100), ("Serene Grace",)),
    (386, "Deoxys", ("Psychic",), (50, 150, 50, 150, 50, 150), ("Pressure",)),
)

# ── Evolution edges ──────────────────────────────────────────────────────────
# (from_dex, to_dex, method, requirement).  The first row for a species is its
# primary evolution; later rows are branches.

EVOLUTION_ROWS: Tuple[Tuple[int, int, str, Optional[Union[int, str]]], ...] = (
    (1, 2, "LEVEL", 16),
    (2, 3, "LEVEL", 32),
    (4, 5, "LEVEL", 16),
    (5, 6, "LEVEL", 36),
    (7, 8, "LEVEL", 16),
    (8, 9, "LEVEL", 36),
    (10, 11, "LEVEL", 7),
    (11, 12, "LEVEL", 10),
    (13, 14, "LEVEL", 7),
    (14, 15, "LEVEL", 10),
    (16, 17, "LEVEL", 18),
    (17, 18, "LEVEL", 36),
    (19, 20, "LEVEL", 20),
    (21, 22, "LEVEL", 20),
    (23, 24, "LEVEL", 22),
    (25, 26, "STONE", "Thunder Stone"),
    (27, 28, "LEVEL", 22),
    (29, 30, "LEVEL", 16),
    (30, 31, "STONE", "Moon Stone"),
    (32, 33, "LEVEL", 16),
    (33, 34, "STONE", "Moon Stone"),
    (35, 36, "STONE", "Moon Stone"),
    (37, 38, "STONE", "Fire Stone"),
    (39, 40, "STONE", "Moon Stone"),
    (41, 42, "LEVEL", 22),
    (42, 169, "FRIENDSHIP", None),
    (43, 44, "LEVEL", 21),
    (44, 45, "STONE", "Leaf Stone"),
    (44, 182, "STONE", "Sun Stone"),
    (46, 47, "LEVEL", 24),
    (48, 49, "LEVEL", 31),
    (50, 51, "LEVEL", 26),
    (52, 53, "LEVEL", 28),
    (54, 55, "LEVEL", 33),
    (56, 57, "LEVEL", 28),
    (58, 59, "STONE", "Fire Stone"),
    (60, 61, "LEVEL", 25),
    (61, 62, "STONE", "Water Stone"),
    (61, 186, "TRADE_ITEM", "Kings Rock"),
    (63, 64, "LEVEL", 16),
    (64, 65, "TRADE", None),
    (66, 67, "LEVEL", 28),
    (67, 68, "TRADE", None),
    (69, 70, "LEVEL", 21),
    (70, 71, "STONE", "Leaf Stone"),
    (72, 73, "LEVEL", 30),
    (74, 75, "LEVEL", 25),
    (75, 76, "TRADE", None),
    (77, 78, "LEVEL", 40),
    (79, 80, "LEVEL", 37),
    (79, 199, "TRADE_ITEM", "Kings Rock"),
    (81, 82, "LEVEL", 30),
    (84, 85, "LEVEL", 31),
    (86, 87, "LEVEL", 34),
    (88, 89, "LEVEL", 38),
    (90, 91, "STONE", "Water Stone"),
    (92, 93, "LEVEL", 25),
    (93, 94, "TRADE", None),
    (95, 208, "TRADE_ITEM", "Metal Coat"),
    (96, 97, "LEVEL", 26),
    (98, 99, "LEVEL", 28),
    (100, 101, "LEVEL", 30),
    (102, 103, "STONE", "Leaf Stone"),
    (104, 105, "LEVEL", 28),
    (109, 110, "LEVEL", 35),
    (111, 112, "LEVEL", 42),
    (113, 242, "FRIENDSHIP", None),
    (116, 117, "LEVEL", 32),
    (117, 230, "TRADE_ITEM", "Dragon Scale"),
    (118, 119, "LEVEL", 33),
    (120, 121, "STONE", "Water Stone"),
    (123, 212, "TRADE_ITEM", "Metal Coat"),
    (129, 130, "LEVEL", 20),
    (133, 134, "STONE", "Water Stone"),
    (133, 135, "STONE", "Thunder Stone"),
    (133, 136, "STONE", "Fire Stone"),
    (133, 196, "FRIENDSHIP_DAY", None),
    (133, 197, "FRIENDSHIP_NIGHT", None),
    (137, 233, "TRADE_ITEM", "Upgrade"),
    (138, 139, "LEVEL", 40),
    (140, 141, "LEVEL", 40),
    (147, 148, "LEVEL", 30),
    (148, 149, "LEVEL", 55),
    (152, 153, "LEVEL", 16),
    (153, 154, "LEVEL", 32),
    (155, 156, "LEVEL", 14),
    (156, 157, "LEVEL", 36),
    (158, 159, "LEVEL", 18),
    (159, 160, "LEVEL", 30),
    (161, 162, "LEVEL", 15),
    (163, 164, "LEVEL", 20),
    (165, 166, "LEVEL", 18),
    (167, 168, "LEVEL", 22),
    (170, 171, "LEVEL", 27),
    (172, 25, "FRIENDSHIP", None),
    (173, 35, "FRIENDSHIP", None),
    (174, 39, "FRIENDSHIP", None),
    (175, 176, "FRIENDSHIP", None),
    (177, 178, "LEVEL", 25),
    (179, 180, "LEVEL", 15),
    (180, 181, "LEVEL", 30),
    (183, 184, "LEVEL", 18),
    (187, 188, "LEVEL", 18),
    (188, 189, "LEVEL", 27),
    (191, 192, "STONE", "Sun Stone"),
    (194, 195, "LEVEL", 20),
    (204, 205, "LEVEL", 31),
    (209, 210, "LEVEL", 23),
    (216, 217, "LEVEL", 30),
    (218, 219, "LEVEL", 38),
    (220, 221, "LEVEL", 33),
    (223, 224, "LEVEL", 25),
    (228, 229, "LEVEL", 24),
    (231, 232, "LEVEL", 25),
    (236, 106, "LEVEL_ATK_GT_DEF", 20),
    (236, 107, "LEVEL_DEF_GT_ATK", 20),
    (236, 237, "LEVEL_ATK_EQ_DEF", 20),
    (238, 124, "LEVEL", 30),
    (239, 125, "LEVEL", 30),
    (240, 126, "LEVEL", 30),
    (246, 247, "LEVEL", 30),
    (247, 248, "LEVEL", 55),
    (252, 253, "LEVEL", 16),
    (253, 254, "LEVEL", 36),
    (255, 256, "LEVEL", 16),
    (256, 257, "LEVEL", 36),
    (258, 259, "LEVEL", 16),
    (259, 260, "LEVEL", 36),
    (261, 262, "LEVEL", 18),
    (263, 264, "LEVEL", 20),
    (265, 266, "LEVEL_SILCOON", 7),
    (265, 268, "LEVEL_CASCOON", 7),
    (266, 267, "LEVEL", 10),
    (268, 269, "LEVEL", 10),
    (270, 271, "LEVEL", 14),
    (271, 272, "STONE", "Water Stone"),
    (273, 274, "LEVEL", 14),
    (274, 275, "STONE", "Leaf Stone"),
    (276, 277, "LEVEL", 22),
    (278, 279, "LEVEL", 25),
    (280, 281, "LEVEL", 20),
    (281, 282, "LEVEL", 30),
    (283, 284, "LEVEL", 22),
    (285, 286, "LEVEL", 23),
    (287, 288, "LEVEL", 18),
    (288, 289, "LEVEL", 36),
    (290, 291, "LEVEL_NINJASK", 20),
    (290, 292, "LEVEL_SHEDINJA", 20),
    (293, 294, "LEVEL", 20),
    (294, 295, "LEVEL", 40),
    (296, 297, "LEVEL", 24),
    (298, 183, "FRIENDSHIP", None),
    (300, 301, "STONE", "Moon Stone"),
    (304, 305, "LEVEL", 32),
    (305, 306, "LEVEL", 42),
    (307, 308, "LEVEL", 37),
    (309, 310, "LEVEL", 26),
    (316, 317, "LEVEL", 26),
    (318, 319, "LEVEL", 30),
    (320, 321, "LEVEL", 40),
    (322, 323, "LEVEL", 33),
    (325, 326, "LEVEL", 32),
    (328, 329, "LEVEL", 35),
    (329, 330, "LEVEL", 45),
    (331, 332, "LEVEL", 32),
    (333, 334, "LEVEL", 35),
    (339, 340, "LEVEL", 30),
    (341, 342, "LEVEL", 30),
    (343, 344, "LEVEL", 36),
    (345, 346, "LEVEL", 40),
    (347, 348, "LEVEL", 40),
    (349, 350, "BEAUTY", None),
    (353, 354, "LEVEL", 37),
    (355, 356, "LEVEL", 37),
    (360, 202, "LEVEL", 15),
    (361, 362, "LEVEL", 42),
    (363, 364, "LEVEL", 32),
    (364, 365, "LEVEL", 44),
    (366, 367, "TRADE_ITEM", "Deep Sea Tooth"),
    (366, 368, "TRADE_ITEM", "Deep Sea Scale"),
    (371, 372, "LEVEL", 30),
    (372, 373, "LEVEL", 50),
    (374, 375, "LEVEL", 20),
    (375, 376, "LEVEL", 45),
)

# Baby forms introduced in Gen 2/3 (stage 0 in-game, counted as stage 1 here)
BABY_IDS = frozenset({
    172, 173, 174, 175, 236, 238, 239, 240, 298, 360,
})

# ── Where to find them ───────────────────────────────────────────────────────
# dex → (obtain methods, FR/LG + Emerald location names)

LOCATION_ROWS: Dict[int, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    1: (("GIFT",), ("Pallet Town (starter)",)),
    4: (("GIFT",), ("Pallet Town (starter)",)),
    7: (("GIFT",), ("Pallet Town (starter)",)),
    10: (("WILD",), ("Viridian Forest", "Route 2", "Pattern Bush")),
    11: (("WILD",), ("Viridian Forest", "Route 2", "Pattern Bush")),
    13: (("WILD",), ("Viridian Forest", "Route 2", "Pattern Bush")),
    14: (("WILD",), ("Viridian Forest", "Route 2", "Pattern Bush")),
    16: (("WILD",), ("Route 1", "Route 2", "Route 5-8", "Route 24-25")),
    17: (("WILD",), ("Route 13-15", "Berry Forest")),
    19: (("WILD",), ("Route 1", "Route 2", "Route 4", "Route 16-18")),
    20: (("WILD",), ("Route 16-18", "Pokemon Mansion")),
    21: (("WILD",), ("Route 3", "Route 4", "Route 9-11")),
    22: (("WILD",), ("Route 17", "Route 18", "Treasure Beach")),
    23: (("WILD",), ("Route 4", "Route 8-11", "Route 23")),
    24: (("WILD",), ("Route 23", "Victory Road")),
    25: (("WILD",), ("Viridian Forest", "Power Plant")),
    27: (("WILD",), ("Route 4", "Route 8-11", "Route 23")),
    28: (("WILD",), ("Route 23", "Victory Road")),
    29: (("WILD",), ("Route 3", "Safari Zone")),
    32: (("WILD",), ("Route 3", "Safari Zone")),
    35: (("WILD",), ("Mt. Moon",)),
    37: (("WILD",), ("Pokemon Mansion", "Mt. Ember")),
    39: (("WILD",), ("Route 3",)),
    41: (("WILD",), ("Mt. Moon", "Rock Tunnel", "Seafoam Islands")),
    42: (("WILD",), ("Cerulean Cave", "Victory Road", "Lost Cave")),
    43: (("WILD",), ("Route 5-7", "Route 12-15", "Route 24-25")),
    44: (("WILD",), ("Route 12-15", "Berry Forest", "Cape Brink")),
    46: (("WILD",), ("Mt. Moon", "Safari Zone")),
    47: (("WILD",), ("Safari Zone", "Cerulean Cave")),
    48: (("WILD",), ("Route 12-15", "Safari Zone")),
    49: (("WILD",), ("Safari Zone", "Berry Forest")),
    50: (("WILD",), ("Diglett's Cave",)),
    51: (("WILD",), ("Diglett's Cave",)),
    52: (("WILD",), ("Route 5-8", "Pokemon Mansion")),
    54: (("WILD", "SURF"), ("Safari Zone", "Cerulean Cave", "Berry Forest")),
    55: (("SURF",), ("Cerulean Cave",)),
    56: (("WILD",), ("Route 3", "Route 4", "Rock Tunnel")),
    57: (("WILD",), ("Cerulean Cave",)),
    58: (("WILD",), ("Pokemon Mansion", "Route 7-8")),
    60: (("FISHING", "SURF"), ("Route 22-25", "Viridian City", "Cerulean City")),
    61: (("FISHING", "SURF"), ("Route 22-25", "Cerulean Cave")),
    63: (("WILD",), ("Route 24-25", "Game Corner")),
    64: (("WILD",), ("Cerulean Cave",)),
    66: (("WILD",), ("Rock Tunnel", "Victory Road")),
    67: (("WILD",), ("Cerulean Cave", "Victory Road")),
    69: (("WILD",), ("Route 5-7", "Route 12-15", "Route 24-25")),
    70: (("WILD",), ("Route 12-15", "Berry Forest", "Cape Brink")),
    72: (("SURF",), ("Most water routes",)),
    73: (("SURF",), ("Most water routes (rare)",)),
    74: (("WILD",), ("Mt. Moon", "Rock Tunnel", "Victory Road")),
    75: (("WILD",), ("Cerulean Cave", "Victory Road")),
    77: (("WILD",), ("Kindle Road", "Mt. Ember")),
    78: (("WILD",), ("Kindle Road (rare)",)),
    79: (("FISHING", "SURF"), ("Seafoam Islands", "Cape Brink")),
    80: (("SURF",), ("Seafoam Islands (rare)",)),
    81: (("WILD",), ("Power Plant",)),
    82: (("WILD",), ("Power Plant (rare)",)),
    83: (("TRADE",), ("Vermilion City (in-game trade)",)),
    84: (("WILD",), ("Route 16-18", "Safari Zone")),
    85: (("WILD",), ("Kindle Road",)),
    86: (("WILD",), ("Seafoam Islands", "Icefall Cave")),
    87: (("WILD",), ("Seafoam Islands",)),
    88: (("WILD",), ("Pokemon Mansion", "Celadon City")),
    89: (("WILD",), ("Pokemon Mansion",)),
    90: (("FISHING",), ("Route 19-21", "Vermilion City")),
    92: (("WILD",), ("Pokemon Tower", "Lost Cave")),
    93: (("WILD",), ("Pokemon Tower (rare)", "Lost Cave")),
    95: (("WILD",), ("Rock Tunnel", "Victory Road")),
    96: (("WILD",), ("Route 11", "Berry Forest")),
    97: (("WILD", "STATIC"), ("Berry Forest (static)", "Safari Zone")),
    98: (("FISHING", "SURF"), ("Route 19-21", "Vermilion City", "One Island")),
    100: (("WILD",), ("Power Plant", "Rocket Hideout")),
    101: (("WILD", "STATIC"), ("Power Plant (static)",)),
    102: (("WILD",), ("Safari Zone", "Berry Forest")),
    104: (("WILD",), ("Pokemon Tower", "Sevault Canyon")),
    105: (("WILD",), ("Sevault Canyon", "Victory Road")),
    106: (("GIFT",), ("Saffron City (Fighting Dojo)",)),
    107: (("GIFT",), ("Saffron City (Fighting Dojo)",)),
    108: (("WILD",), ("Route 18 (rare)",)),
    109: (("WILD",), ("Pokemon Mansion",)),
    110: (("WILD",), ("Pokemon Mansion",)),
    111: (("WILD",), ("Safari Zone", "Victory Road")),
    112: (("WILD",), ("Cerulean Cave",)),
    113: (("WILD",), ("Safari Zone (rare)",)),
    114: (("WILD",), ("Route 21", "Treasure Beach")),
    115: (("SAFARI",), ("Safari Zone (rare)",)),
    116: (("FISHING",), ("Seafoam Islands", "Treasure Beach")),
    117: (("FISHING",), ("Seafoam Islands (rare)",)),
    118: (("FISHING", "SURF"), ("Route 6", "Cerulean City", "Safari Zone")),
    119: (("FISHING",), ("Safari Zone", "Cerulean Cave")),
    120: (("FISHING", "SURF"), ("Vermilion City", "Pallet Town")),
    122: (("TRADE",), ("Route 2 (in-game trade)",)),
    123: (("SAFARI", "GAME_CORNER"), ("Safari Zone", "Game Corner")),
    124: (("TRADE",), ("Cerulean City (in-game trade)",)),
    125: (("WILD",), ("Power Plant",)),
    126: (("WILD",), ("Mt. Ember",)),
    127: (("SAFARI",), ("Safari Zone",)),
    128: (("SAFARI",), ("Safari Zone",)),
    129: (("FISHING",), ("Almost any water body",)),
    131: (("GIFT",), ("Silph Co.",)),
    132: (("WILD",), ("Pokemon Mansion", "Cerulean Cave")),
    133: (("GIFT",), ("Celadon Mansion",)),
    137: (("GAME_CORNER",), ("Game Corner",)),
    138: (("FOSSIL",), ("Cinnabar Lab (Helix Fossil)",)),
    140: (("FOSSIL",), ("Cinnabar Lab (Dome Fossil)",)),
    142: (("FOSSIL",), ("Cinnabar Lab (Old Amber)",)),
    143: (("STATIC",), ("Route 12", "Route 16")),
    144: (("STATIC",), ("Seafoam Islands B4F",)),
    145: (("STATIC",), ("Power Plant",)),
    146: (("STATIC",), ("Mt. Ember Summit",)),
    147: (("FISHING",), ("Safari Zone (Super Rod)",)),
    148: (("FISHING",), ("Safari Zone (Super Rod, rare)",)),
    150: (("STATIC",), ("Cerulean Cave B1F",)),
    151: (("EVENT",), ("Event only",)),
    172: (("BREEDING",), ()),
    173: (("BREEDING",), ()),
    174: (("BREEDING",), ()),
    185: (("STATIC",), ("Battle Frontier",)),
    201: (("WILD",), ("Tanoby Chambers", "Tanoby Chambers")),
    236: (("BREEDING",), ()),
    238: (("BREEDING",), ()),
    239: (("BREEDING",), ()),
    240: (("BREEDING",), ()),
    246: (("WILD",), ("Sevault Canyon",)),
    249: (("STATIC",), ("Navel Rock",)),
    250: (("STATIC",), ("Navel Rock",)),
    251: (("EVENT",), ("Event only",)),
    252: (("GIFT",), ("Littleroot Town (starter)",)),
    255: (("GIFT",), ("Littleroot Town (starter)",)),
    258: (("GIFT",), ("Littleroot Town (starter)",)),
    261: (("WILD",), ("Route 101-103",)),
    263: (("WILD",), ("Route 101-103",)),
    265: (("WILD",), ("Petalburg Woods",)),
    270: (("WILD",), ("Route 102-103",)),
    273: (("WILD",), ("Route 102",)),
    276: (("WILD",), ("Route 104", "Petalburg Woods")),
    278: (("WILD",), ("Route 103-110",)),
    280: (("WILD",), ("Route 102",)),
    285: (("WILD",), ("Petalburg Woods",)),
    287: (("WILD",), ("Petalburg Woods",)),
    290: (("WILD",), ("Route 116",)),
    293: (("WILD",), ("Rusturf Tunnel",)),
    296: (("WILD",), ("Granite Cave",)),
    299: (("WILD",), ("Granite Cave",)),
    300: (("WILD",), ("Route 116",)),
    302: (("WILD",), ("Granite Cave",)),
    303: (("WILD",), ("Granite Cave",)),
    304: (("WILD",), ("Granite Cave",)),
    307: (("WILD",), ("Mt. Pyre",)),
    309: (("WILD",), ("Route 110",)),
    311: (("WILD",), ("Route 110",)),
    312: (("WILD",), ("Route 110",)),
    313: (("WILD",), ("Route 117",)),
    314: (("WILD",), ("Route 117",)),
    315: (("WILD",), ("Route 117",)),
    316: (("WILD",), ("Route 110",)),
    318: (("FISHING",), ("Route 118-119",)),
    320: (("FISHING",), ("Route 122",)),
    322: (("WILD",), ("Route 112", "Fiery Path")),
    324: (("WILD",), ("Fiery Path",)),
    325: (("WILD",), ("Jagged Pass",)),
    327: (("WILD",), ("Route 113",)),
    328: (("WILD",), ("Route 111 (desert)",)),
    331: (("WILD",), ("Route 111 (desert)",)),
    333: (("WILD",), ("Route 114-115",)),
    335: (("WILD",), ("Route 114",)),
    336: (("WILD",), ("Route 114",)),
    337: (("WILD",), ("Meteor Falls",)),
    338: (("WILD",), ("Meteor Falls",)),
    339: (("FISHING",), ("Route 111", "Meteor Falls")),
    341: (("FISHING",), ("Route 102-103",)),
    343: (("WILD",), ("Route 111 (desert)",)),
    345: (("FOSSIL",), ("Rustboro City (Root Fossil)",)),
    347: (("FOSSIL",), ("Rustboro City (Claw Fossil)",)),
    349: (("FISHING",), ("Route 119 (6 specific tiles)",)),
    351: (("GIFT",), ("Weather Institute",)),
    352: (("STATIC",), ("Route 119-120",)),
    353: (("WILD",), ("Mt. Pyre",)),
    355: (("WILD",), ("Mt. Pyre",)),
    357: (("WILD",), ("Route 119",)),
    358: (("WILD",), ("Mt. Pyre (rare)",)),
    359: (("WILD",), ("Route 120",)),
    361: (("WILD",), ("Shoal Cave",)),
    363: (("WILD",), ("Shoal Cave",)),
    366: (("FISHING",), ("Underwater",)),
    369: (("FISHING",), ("Underwater",)),
    370: (("FISHING",), ("Route 128",)),
    371: (("WILD",), ("Meteor Falls (back room)",)),
    374: (("GIFT",), ("Steven's house (post-E4)",)),
    377: (("STATIC",), ("Desert Ruins",)),
    378: (("STATIC",), ("Island Cave",)),
    379: (("STATIC",), ("Ancient Tomb",)),
    380: (("WILD",), ("Roaming (Emerald/Sapphire)",)),
    381: (("WILD",), ("Roaming (Emerald/Ruby)",)),
    382: (("STATIC",), ("Cave of Origin / Marine Cave",)),
    383: (("STATIC",), ("Cave of Origin / Terra Cave",)),
    384: (("STATIC",), ("Sky Pillar",)),
    385: (("EVENT",), ("Event only",)),
    386: (("STATIC",), ("Birth Island", "Birth Island")),
}

# ── Special classes ──────────────────────────────────────────────────────────

LEGENDARY_IDS = frozenset({
    144, 145, 146, 150, 151,                # Articuno Zapdos Moltres Mewtwo Mew
    243, 244, 245, 249, 250, 251,           # Raikou Entei Suicune Lugia Ho-Oh Celebi
    377, 378, 379, 380, 381, 382, 383, 384, 385, 386,
})

PSEUDO_LEGENDARY_IDS = frozenset({149, 248, 373, 376})  # Dragonite Tyranitar Salamence Metagross
