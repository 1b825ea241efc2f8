# hma_decoder/catalog/tables.py
"""Raw HMA code tables.

Weapons are matched by an ammunition entry with the same code in the
ammunition table of the same tech base.
"""

# Codes with the same meaning regardless of tech base.
GENERIC_EQUIPMENT = {
    0x09: "Heat Sink",
    0x0B: "Jump Jet",
    0x14: "Endo Steel",
    0x15: "Ferro-Fibrous",
}

# Codes that never name equipment: empty slot, quad actuators, fusion engine.
NON_EQUIPMENT_CODES = frozenset({0x00, 0x07, 0x08, 0x0F})

IS_EQUIPMENT = {
    0x0A: "ISDouble Heat Sink",
    0x12: "ISTargeting Computer",
    0x17: "ISMASC",
    0x18: "ISArtemisIV",
    0x19: "ISCASE",
    0x33: "ISERLargeLaser",
    0x34: "ISERPPC",
    0x35: "ISFlamer",
    0x36: "ISLaserAMS",
    0x37: "ISLargeLaser",
    0x38: "ISMediumLaser",
    0x39: "ISSmallLaser",
    0x3A: "ISPPC",
    0x3B: "ISLargePulseLaser",
    0x3C: "ISMediumPulseLaser",
    0x3D: "ISSmallPulseLaser",
    0x3E: "ISAC2",
    0x3F: "ISAC5",
    0x40: "ISAC10",
    0x41: "ISAC20",
    0x42: "ISAntiMissileSystem",
    0x43: "Long Tom Cannon",
    0x44: "Sniper Cannon",
    0x45: "Thumper Cannon",
    0x46: "ISLightGaussRifle",
    0x47: "ISGaussRifle",
    0x48: "ISLargeXPulseLaser",
    0x49: "ISMediumXPulseLaser",
    0x4A: "ISSmallXPulseLaser",
    0x4B: "ISLBXAC2",
    0x4C: "ISLBXAC5",
    0x4D: "ISLBXAC10",
    0x4E: "ISLBXAC20",
    0x4F: "ISMachine Gun",
    0x50: "ISLAC2",
    0x51: "ISLAC5",
    0x52: "ISHeavyFlamer",
    0x54: "ISUltraAC2",
    0x55: "ISUltraAC5",
    0x56: "ISUltraAC10",
    0x57: "ISUltraAC20",
    0x59: "PPC Capacitor",
    0x5A: "ISERMediumLaser",
    0x5B: "ISERSmallLaser",
    0x5C: "ISAntiPersonnelPod",
    0x60: "ISLRM5",
    0x61: "ISLRM10",
    0x62: "ISLRM15",
    0x63: "ISLRM20",
    0x66: "ISImprovedNarc",
    0x67: "ISSRM2",
    0x68: "ISSRM4",
    0x69: "ISSRM6",
    0x6A: "ISStreakSRM2",
    0x6B: "ISStreakSRM4",
    0x6C: "ISStreakSRM6",
    0x6D: "ISThunderbolt5",
    0x6E: "ISThunderbolt10",
    0x6F: "ISThunderbolt15",
    0x70: "ISThunderbolt20",
    0x71: "ISArrowIVSystem",
    0x72: "ISAngelECMSuite",
    0x73: "ISBeagleActiveProbe",
    0x74: "ISBloodhoundActiveProbe",
    0x75: "ISC3MasterComputer",
    0x76: "ISC3SlaveUnit",
    0x77: "ISImprovedC3CPU",
    0x78: "ISGuardianECM",
    0x79: "ISNarcBeacon",
    0x7A: "ISTAG",
    0x7B: "ISLRM5 (OS)",
    0x7C: "ISLRM10 (OS)",
    0x7D: "ISLRM15 (OS)",
    0x7E: "ISLRM20 (OS)",
    0x7F: "ISSRM2 (OS)",
    0x80: "ISSRM4 (OS)",
    0x81: "ISSRM6 (OS)",
    0x82: "ISStreakSRM2 (OS)",
    0x83: "ISStreakSRM4 (OS)",
    0x84: "ISStreakSRM6 (OS)",
    0x85: "ISVehicleFlamer",
    0x86: "ISLongTomArtillery",
    0x87: "ISSniperArtillery",
    0x88: "ISThumperArtillery",
    0x89: "ISMRM10",
    0x8A: "ISMRM20",
    0x8B: "ISMRM30",
    0x8C: "ISMRM40",
    0x8E: "ISMRM10 (OS)",
    0x8F: "ISMRM20 (OS)",
    0x90: "ISMRM30 (OS)",
    0x91: "ISMRM40 (OS)",
    0x92: "ISLRTorpedo5",
    0x93: "ISLRTorpedo10",
    0x94: "ISLRTorpedo15",
    0x95: "ISLRTorpedo20",
    0x96: "ISSRTorpedo2",
    0x97: "ISSRTorpedo4",
    0x98: "ISSRTorpedo6",
    0x99: "ISLRM5 (I-OS)",
    0x9A: "ISLRM10 (I-OS)",
    0x9B: "ISLRM15 (I-OS)",
    0x9C: "ISLRM20 (I-OS)",
    0x9D: "ISSRM2 (I-OS)",
    0x9E: "ISSRM4 (I-OS)",
    0x9F: "ISSRM6 (I-OS)",
    0xA0: "ISStreakSRM2 (I-OS)",
    0xA1: "ISStreakSRM4 (I-OS)",
    0xA2: "ISStreakSRM6 (I-OS)",
    0xA3: "ISMRM10 (I-OS)",
    0xA4: "ISMRM20 (I-OS)",
    0xA5: "ISMRM30 (I-OS)",
    0xA6: "ISMRM40 (I-OS)",
    0x108: "ISTHBLBXAC2",
    0x109: "ISTHBLBXAC5",
    0x10A: "ISTHBLBXAC20",
    0x10B: "ISUltraAC2 (THB)",
    0x10C: "ISUltraAC10 (THB)",
    0x10D: "ISUltraAC20 (THB)",
    0x11D: "ISTHBAngelECMSuite",
    0x11E: "ISTHBBloodhoundActiveProbe",
    0x121: "ISRotaryAC2",
    0x122: "ISRotaryAC5",
    0x123: "ISHeavyGaussRifle",
    0x12B: "ISRocketLauncher10",
    0x12C: "ISRocketLauncher15",
    0x12D: "ISRocketLauncher20",
}

IS_AMMO = {
    0x3E: "ISAC2 Ammo",
    0x3F: "ISAC5 Ammo",
    0x40: "ISAC10 Ammo",
    0x41: "ISAC20 Ammo",
    0x42: "ISAMS Ammo",
    0x43: "Long Tom Cannon Ammo",
    0x44: "Sniper Cannon Ammo",
    0x45: "Thumper Cannon Ammo",
    0x46: "ISLightGauss Ammo",
    0x47: "ISGauss Ammo",
    0x4B: "ISLBXAC2 Ammo",
    0x4C: "ISLBXAC5 Ammo",
    0x4D: "ISLBXAC10 Ammo",
    0x4E: "ISLBXAC20 Ammo",
    0x4F: "ISMG Ammo (200)",
    0x50: "ISLAC2 Ammo",
    0x51: "ISLAC5 Ammo",
    0x52: "ISHeavyFlamer Ammo",
    0x54: "ISUltraAC2 Ammo",
    0x55: "ISUltraAC5 Ammo",
    0x56: "ISUltraAC10 Ammo",
    0x57: "ISUltraAC20 Ammo",
    0x60: "ISLRM5 Ammo",
    0x61: "ISLRM10 Ammo",
    0x62: "ISLRM15 Ammo",
    0x63: "ISLRM20 Ammo",
    0x66: "ISiNarc Pods",
    0x67: "ISSRM2 Ammo",
    0x68: "ISSRM4 Ammo",
    0x69: "ISSRM6 Ammo",
    0x6A: "ISStreakSRM2 Ammo",
    0x6B: "ISStreakSRM4 Ammo",
    0x6C: "ISStreakSRM6 Ammo",
    0x6D: "ISThunderbolt5 Ammo",
    0x6E: "ISThunderbolt10 Ammo",
    0x6F: "ISThunderbolt15 Ammo",
    0x70: "ISThunderbolt20 Ammo",
    0x71: "ISArrowIV Ammo",
    0x79: "ISNarc Pods",
    0x85: "ISVehicleFlamer Ammo",
    0x86: "ISLongTom Ammo",
    0x87: "ISSniper Ammo",
    0x88: "ISThumper Ammo",
    0x89: "ISMRM10 Ammo",
    0x8A: "ISMRM20 Ammo",
    0x8B: "ISMRM30 Ammo",
    0x8C: "ISMRM40 Ammo",
    0x92: "ISLRTorpedo5 Ammo",
    0x93: "ISLRTorpedo10 Ammo",
    0x94: "ISLRTorpedo15 Ammo",
    0x95: "ISLRTorpedo20 Ammo",
    0x96: "ISSRTorpedo2 Ammo",
    0x97: "ISSRTorpedo4 Ammo",
    0x98: "ISSRTorpedo6 Ammo",
    0x108: "ISTHBLBXAC2 Ammo",
    0x109: "ISTHBLBXAC5 Ammo",
    0x10A: "ISTHBLBXAC20 Ammo",
    0x10B: "ISUltraAC2 (THB) Ammo",
    0x10C: "ISUltraAC10 (THB) Ammo",
    0x10D: "ISUltraAC20 (THB) Ammo",
    0x121: "ISRotaryAC2 Ammo",
    0x122: "ISRotaryAC5 Ammo",
    0x123: "ISHeavyGauss Ammo",
}

CLAN_EQUIPMENT = {
    0x0A: "CLDouble Heat Sink",
    0x12: "CLTargeting Computer",
    0x17: "CLMASC",
    0x18: "CLArtemisIV",
    0x33: "CLERLargeLaser",
    0x34: "CLERMediumLaser",
    0x35: "CLERSmallLaser",
    0x36: "CLERPPC",
    0x37: "CLFlamer",
    0x38: "CLMediumLaser",
    0x39: "CLSmallLaser",
    0x3A: "CLPPC",
    0x3C: "CLLargePulseLaser",
    0x3D: "CLMediumPulseLaser",
    0x3E: "CLSmallPulseLaser",
    0x3F: "CLAngelECMSuite",
    0x40: "CLAntiMissileSystem",
    0x41: "CLGaussRifle",
    0x42: "CLLBXAC2",
    0x43: "CLLBXAC5",
    0x44: "CLLBXAC10",
    0x45: "CLLBXAC20",
    0x46: "CLMG",
    0x47: "CLUltraAC2",
    0x48: "CLUltraAC5",
    0x49: "CLUltraAC10",
    0x4A: "CLUltraAC20",
    0x4B: "CLLRM5",
    0x4C: "CLLRM10",
    0x4D: "CLLRM15",
    0x4E: "CLLRM20",
    0x4F: "CLSRM2",
    0x50: "CLSRM4",
    0x51: "CLSRM6",
    0x52: "CLStreakSRM2",
    0x53: "CLStreakSRM4",
    0x54: "CLStreakSRM6",
    0x55: "CLArrowIVSystem",
    0x56: "CLAntiPersonnelPod",
    0x57: "CLActiveProbe",
    0x58: "CLECMSuite",
    0x59: "CLNarcBeacon",
    0x5A: "CLTAG",
    0x5B: "CLERMicroLaser",
    0x5C: "CLLRM5 (OS)",
    0x5D: "CLLRM10 (OS)",
    0x5E: "CLLRM15 (OS)",
    0x5F: "CLLRM20 (OS)",
    0x60: "CLSRM2 (OS)",
    0x61: "CLSRM4 (OS)",
    0x62: "CLSRM6 (OS)",
    0x63: "CLStreakSRM2 (OS)",
    0x64: "CLStreakSRM4 (OS)",
    0x65: "CLStreakSRM6 (OS)",
    0x66: "CLVehicleFlamer",
    0x67: "CLLongTomArtillery",
    0x68: "CLSniperArtillery",
    0x69: "CLThumperArtillery",
    0x6A: "CLLRTorpedo5",
    0x6B: "CLLRTorpedo10",
    0x6C: "CLLRTorpedo15",
    0x6D: "CLLRTorpedo20",
    0x6E: "CLSRTorpedo2",
    0x6F: "CLSRTorpedo4",
    0x70: "CLSRTorpedo6",
    0x7B: "CLLRM5 (OS)",
    0x7C: "CLLRM10 (OS)",
    0x7D: "CLLRM15 (OS)",
    0x7E: "CLLRM20 (OS)",
    0x7F: "CLSRM2 (OS)",
    0x80: "CLHeavyLargeLaser",
    0x81: "CLHeavyMediumLaser",
    0x82: "CLHeavySmallLaser",
    0x85: "CLVehicleFlamer",
    0x92: "CLLRTorpedo5",
    0x93: "CLLRTorpedo10",
    0x94: "CLLRTorpedo15",
    0x95: "CLLRTorpedo20",
    0x96: "CLSRTorpedo2",
    0x97: "CLSRTorpedo4",
    0x98: "CLSRTorpedo6",
    0xA8: "CLMicroPulseLaser",
    0xAD: "CLLightMG",
    0xAE: "CLHeavyMG",
    0xAF: "CLLightActiveProbe",
    0xB4: "CLLightTAG",
    0xFC: "CLATM3",
    0xFD: "CLATM6",
    0xFE: "CLATM9",
    0xFF: "CLATM12",
}

CLAN_AMMO = {
    0x40: "CLAMS Ammo",
    0x41: "CLGauss Ammo",
    0x42: "CLLBXAC2 Ammo",
    0x43: "CLLBXAC5 Ammo",
    0x44: "CLLBXAC10 Ammo",
    0x45: "CLLBXAC20 Ammo",
    0x46: "CLMG Ammo (200)",
    0x47: "CLUltraAC2 Ammo",
    0x48: "CLUltraAC5 Ammo",
    0x49: "CLUltraAC10 Ammo",
    0x4A: "CLUltraAC20 Ammo",
    0x4B: "CLLRM5 Ammo",
    0x4C: "CLLRM10 Ammo",
    0x4D: "CLLRM15 Ammo",
    0x4E: "CLLRM20 Ammo",
    0x4F: "CLSRM2 Ammo",
    0x50: "CLSRM4 Ammo",
    0x51: "CLSRM6 Ammo",
    0x52: "CLStreakSRM2 Ammo",
    0x53: "CLStreakSRM4 Ammo",
    0x54: "CLStreakSRM6 Ammo",
    0x55: "CLArrowIV Ammo",
    0x66: "CLVehicleFlamer Ammo",
    0x67: "CLLongTomArtillery Ammo",
    0x68: "CLSniperArtillery Ammo",
    0x69: "CLThumperArtillery Ammo",
    0x6A: "CLTorpedoLRM5 Ammo",
    0x6B: "CLTorpedoLRM10 Ammo",
    0x6C: "CLTorpedoLRM15 Ammo",
    0x6D: "CLTorpedoLRM20 Ammo",
    0x6E: "CLTorpedoSRM2 Ammo",
    0x6F: "CLTorpedoSRM4 Ammo",
    0x70: "CLTorpedoSRM6 Ammo",
    0x85: "CLVehicleFlamer Ammo",
    0x92: "CLTorpedoLRM5 Ammo",
    0x93: "CLTorpedoLRM10 Ammo",
    0x94: "CLTorpedoLRM15 Ammo",
    0x95: "CLTorpedoLRM20 Ammo",
    0x96: "CLTorpedoSRM2 Ammo",
    0x97: "CLTorpedoSRM4 Ammo",
    0x98: "CLTorpedoSRM6 Ammo",
    0xAD: "CLLightMG Ammo (200)",
    0xAE: "CLHeavyMG Ammo (100)",
    0xFC: "CLATM3 Ammo",
    0xFD: "CLATM6 Ammo",
    0xFE: "CLATM9 Ammo",
    0xFF: "CLATM12 Ammo",
}

# Mixed tech designs use the Inner Sphere codes with Clan items moved into
# their own range.
MIXED_EQUIPMENT_OVERLAY = {
    0x58: "CLERMicroLaser",
    0x5E: "CLLightMG",
    0x5F: "CLHeavyMG",
    0x64: "CLLightActiveProbe",
    0x65: "CLLightTAG",
    0xA7: "CLERLargeLaser",
    0xA8: "CLERMediumLaser",
    0xA9: "CLERSmallLaser",
    0xAA: "CLERPPC",
    0xAB: "CLFlamer",
    0xB0: "CLLargePulseLaser",
    0xB1: "CLMediumPulseLaser",
    0xB2: "CLSmallPulseLaser",
    0xB4: "CLAntiMissileSystem",
    0xB5: "CLGaussRifle",
    0xB6: "CLLBXAC2",
    0xB7: "CLLBXAC5",
    0xB8: "CLLBXAC10",
    0xB9: "CLLBXAC20",
    0xBA: "CLMG",
    0xBB: "CLUltraAC2",
    0xBC: "CLUltraAC5",
    0xBD: "CLUltraAC10",
    0xBE: "CLUltraAC20",
    0xBF: "CLLRM5",
    0xC0: "CLLRM10",
    0xC1: "CLLRM15",
    0xC2: "CLLRM20",
    0xC3: "CLSRM2",
    0xC4: "CLSRM4",
    0xC5: "CLSRM6",
    0xC6: "CLStreakSRM2",
    0xC7: "CLStreakSRM4",
    0xC8: "CLStreakSRM6",
    0xC9: "CLArrowIVSystem",
    0xCA: "CLAntiPersonnelPod",
    0xCB: "CLActiveProbe",
    0xCC: "CLECMSuite",
    0xCD: "CLNarcBeacon",
    0xCE: "CLTAG",
    0xD0: "CLLRM5 (OS)",
    0xD1: "CLLRM10 (OS)",
    0xD2: "CLLRM15 (OS)",
    0xD3: "CLLRM20 (OS)",
    0xD4: "CLSRM2 (OS)",
    0xD5: "CLSRM4 (OS)",
    0xD6: "CLSRM6 (OS)",
    0xD7: "CLStreakSRM2 (OS)",
    0xD8: "CLStreakSRM4 (OS)",
    0xD9: "CLStreakSRM6 (OS)",
    0xDA: "CLVehicleFlamer",
    0xDB: "CLLongTomArtillery",
    0xDC: "CLSniperArtillery",
    0xDD: "CLThumperArtillery",
    0xDE: "CLLRTorpedo5",
    0xDF: "CLLRTorpedo10",
    0xE0: "CLLRTorpedo15",
    0xE1: "CLLRTorpedo20",
    0xE2: "CLSRTorpedo2",
    0xE3: "CLSRTorpedo4",
    0xE4: "CLSRTorpedo6",
    0xF4: "CLHeavyLargeLaser",
    0xF5: "CLHeavyMediumLaser",
    0xF6: "CLHeavySmallLaser",
    0xFC: "CLATM3",
    0xFD: "CLATM6",
    0xFE: "CLATM9",
    0xFF: "CLATM12",
}

# Ammunition in mixed designs uses the same code as the weapon it feeds.
MIXED_AMMO_OVERLAY = {
    0x5E: "CLLightMG Ammo",
    0x5F: "CLHeavyMG Ammo",
    0xB4: "CLAntiMissileSystem Ammo",
    0xB5: "CLGaussRifle Ammo",
    0xB6: "CLLBXAC2 Ammo",
    0xB7: "CLLBXAC5 Ammo",
    0xB8: "CLLBXAC10 Ammo",
    0xB9: "CLLBXAC20 Ammo",
    0xBA: "CLMG Ammo",
    0xBB: "CLUltraAC2 Ammo",
    0xBC: "CLUltraAC5 Ammo",
    0xBD: "CLUltraAC10 Ammo",
    0xBE: "CLUltraAC20 Ammo",
    0xBF: "CLLRM5 Ammo",
    0xC0: "CLLRM10 Ammo",
    0xC1: "CLLRM15 Ammo",
    0xC2: "CLLRM20 Ammo",
    0xC3: "CLSRM2 Ammo",
    0xC4: "CLSRM4 Ammo",
    0xC5: "CLSRM6 Ammo",
    0xC6: "CLStreakSRM2 Ammo",
    0xC7: "CLStreakSRM4 Ammo",
    0xC8: "CLStreakSRM6 Ammo",
    0xC9: "CLArrowIVSystem Ammo",
    0xCD: "CLNarcBeacon Ammo",
    0xDA: "CLVehicleFlamer Ammo",
    0xDB: "CLLongTomArtillery Ammo",
    0xDC: "CLSniperArtillery Ammo",
    0xDD: "CLThumperArtillery Ammo",
    0xDE: "CLLRTorpedo5 Ammo",
    0xDF: "CLLRTorpedo10 Ammo",
    0xE0: "CLLRTorpedo15 Ammo",
    0xE1: "CLLRTorpedo20 Ammo",
    0xE2: "CLSRTorpedo2 Ammo",
    0xE3: "CLSRTorpedo4 Ammo",
    0xE4: "CLSRTorpedo6 Ammo",
}

MG = 'machine gun'
LIGHT_MG = 'light machine gun'
HEAVY_MG = 'heavy machine gun'

# Shots per lot (one ton) for every ammunition name above, plus the half
# ton machine gun lots that have no code of their own. Entries with a
# family name take part in half-lot substitution.
AMMO_LOTS = {
    "ISAC2 Ammo": 45,
    "ISAC5 Ammo": 20,
    "ISAC10 Ammo": 10,
    "ISAC20 Ammo": 5,
    "ISAMS Ammo": 12,
    "Long Tom Cannon Ammo": 5,
    "Sniper Cannon Ammo": 10,
    "Thumper Cannon Ammo": 20,
    "ISLightGauss Ammo": 16,
    "ISGauss Ammo": 8,
    "ISLBXAC2 Ammo": 45,
    "ISLBXAC5 Ammo": 20,
    "ISLBXAC10 Ammo": 10,
    "ISLBXAC20 Ammo": 5,
    "ISMG Ammo (200)": (200, MG),
    "ISMG Ammo (100)": (100, MG),
    "ISLAC2 Ammo": 45,
    "ISLAC5 Ammo": 20,
    "ISHeavyFlamer Ammo": 10,
    "ISUltraAC2 Ammo": 45,
    "ISUltraAC5 Ammo": 20,
    "ISUltraAC10 Ammo": 10,
    "ISUltraAC20 Ammo": 5,
    "ISLRM5 Ammo": 24,
    "ISLRM10 Ammo": 12,
    "ISLRM15 Ammo": 8,
    "ISLRM20 Ammo": 6,
    "ISiNarc Pods": 4,
    "ISSRM2 Ammo": 50,
    "ISSRM4 Ammo": 25,
    "ISSRM6 Ammo": 15,
    "ISStreakSRM2 Ammo": 50,
    "ISStreakSRM4 Ammo": 25,
    "ISStreakSRM6 Ammo": 15,
    "ISThunderbolt5 Ammo": 12,
    "ISThunderbolt10 Ammo": 6,
    "ISThunderbolt15 Ammo": 4,
    "ISThunderbolt20 Ammo": 3,
    "ISArrowIV Ammo": 5,
    "ISNarc Pods": 6,
    "ISVehicleFlamer Ammo": 20,
    "ISLongTom Ammo": 5,
    "ISSniper Ammo": 10,
    "ISThumper Ammo": 20,
    "ISMRM10 Ammo": 24,
    "ISMRM20 Ammo": 12,
    "ISMRM30 Ammo": 8,
    "ISMRM40 Ammo": 6,
    "ISLRTorpedo5 Ammo": 24,
    "ISLRTorpedo10 Ammo": 12,
    "ISLRTorpedo15 Ammo": 8,
    "ISLRTorpedo20 Ammo": 6,
    "ISSRTorpedo2 Ammo": 50,
    "ISSRTorpedo4 Ammo": 25,
    "ISSRTorpedo6 Ammo": 15,
    "ISTHBLBXAC2 Ammo": 45,
    "ISTHBLBXAC5 Ammo": 20,
    "ISTHBLBXAC20 Ammo": 5,
    "ISUltraAC2 (THB) Ammo": 45,
    "ISUltraAC10 (THB) Ammo": 10,
    "ISUltraAC20 (THB) Ammo": 5,
    "ISRotaryAC2 Ammo": 45,
    "ISRotaryAC5 Ammo": 20,
    "ISHeavyGauss Ammo": 4,

    "CLAMS Ammo": 24,
    "CLGauss Ammo": 8,
    "CLLBXAC2 Ammo": 45,
    "CLLBXAC5 Ammo": 20,
    "CLLBXAC10 Ammo": 10,
    "CLLBXAC20 Ammo": 5,
    "CLMG Ammo (200)": (200, MG),
    "CLMG Ammo (100)": (100, MG),
    "CLUltraAC2 Ammo": 45,
    "CLUltraAC5 Ammo": 20,
    "CLUltraAC10 Ammo": 10,
    "CLUltraAC20 Ammo": 5,
    "CLLRM5 Ammo": 24,
    "CLLRM10 Ammo": 12,
    "CLLRM15 Ammo": 8,
    "CLLRM20 Ammo": 6,
    "CLSRM2 Ammo": 50,
    "CLSRM4 Ammo": 25,
    "CLSRM6 Ammo": 15,
    "CLStreakSRM2 Ammo": 50,
    "CLStreakSRM4 Ammo": 25,
    "CLStreakSRM6 Ammo": 15,
    "CLArrowIV Ammo": 5,
    "CLVehicleFlamer Ammo": 20,
    "CLLongTomArtillery Ammo": 5,
    "CLSniperArtillery Ammo": 10,
    "CLThumperArtillery Ammo": 20,
    "CLTorpedoLRM5 Ammo": 24,
    "CLTorpedoLRM10 Ammo": 12,
    "CLTorpedoLRM15 Ammo": 8,
    "CLTorpedoLRM20 Ammo": 6,
    "CLTorpedoSRM2 Ammo": 50,
    "CLTorpedoSRM4 Ammo": 25,
    "CLTorpedoSRM6 Ammo": 15,
    "CLLightMG Ammo (200)": (200, LIGHT_MG),
    "CLLightMG Ammo (100)": (100, LIGHT_MG),
    "CLHeavyMG Ammo (100)": (100, HEAVY_MG),
    "CLHeavyMG Ammo (50)": (50, HEAVY_MG),
    "CLATM3 Ammo": 20,
    "CLATM6 Ammo": 10,
    "CLATM9 Ammo": 7,
    "CLATM12 Ammo": 5,

    "CLLightMG Ammo": (200, LIGHT_MG),
    "CLHeavyMG Ammo": (100, HEAVY_MG),
    "CLMG Ammo": (200, MG),
    "CLAntiMissileSystem Ammo": 24,
    "CLGaussRifle Ammo": 8,
    "CLArrowIVSystem Ammo": 5,
    "CLNarcBeacon Ammo": 6,
    "CLLRTorpedo5 Ammo": 24,
    "CLLRTorpedo10 Ammo": 12,
    "CLLRTorpedo15 Ammo": 8,
    "CLLRTorpedo20 Ammo": 6,
    "CLSRTorpedo2 Ammo": 50,
    "CLSRTorpedo4 Ammo": 25,
    "CLSRTorpedo6 Ammo": 15,
}

# Half-ton replacements, keyed by (family, clan).
HALF_LOT_AMMO = {
    (MG, False): "ISMG Ammo (100)",
    (MG, True): "CLMG Ammo (100)",
    (LIGHT_MG, True): "CLLightMG Ammo (100)",
    (LIGHT_MG, False): "CLLightMG Ammo (100)",
    (HEAVY_MG, True): "CLHeavyMG Ammo (50)",
    (HEAVY_MG, False): "CLHeavyMG Ammo (50)",
}
