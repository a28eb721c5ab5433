"""Published test vectors shared by the test modules."""
from __future__ import annotations


# hex (any delimiter style) -> sentence, from RFC 2289 appendix C and RFC 1751
HEX_VECTORS = {
    "rfc2289 parity": {
        "85c43ee03857765b": "FOWL KID MASH DEAD DUAL OAF",
    },
    "rfc2289 md4": {
        "D185 4218 EBBB 0B51": "ROME MUG FRED SCAN LIVE LACE",
        "6347 3EF0 1CD0 B444": "CARD SAD MINI RYE COL KIN",
        "C5E6 1277 6E6C 237A": "NOTE OUT IBIS SINK NAVE MODE",
        "5007 6F47 EB1A DE4E": "AWAY SEN ROOK SALT LICE MAP",
        "65D2 0D19 49B5 F7AB": "CHEW GRIM WU HANG BUCK SAID",
        "D150 C82C CE6F 62D1": "ROIL FREE COG HUNK WAIT COCA",
        "849C 79D4 F6F5 5388": "FOOL STEM DONE TOOL BECK NILE",
        "8C09 92FB 2508 47B1": "GIST AMOS MOOT AIDS FOOD SEEM",
        "3F3B F4B4 145F D74B": "TAG SLOW NOV MIN WOOL KENO",
    },
    "rfc2289 md5": {
        "9E87 6134 D904 99DD": "INCH SEA ANNE LONG AHEM TOUR",
        "7965 E054 36F5 029F": "EASE OIL FUM CURE AWRY AVIS",
        "50FE 1962 C496 5880": "BAIL TUFT BITS GANG CHEF THY",
        "8706 6DD9 644B F206": "FULL PEW DOWN ONCE MORT ARC",
        "7CD3 4C10 40AD D14B": "FACT HOOF AT FIST SITE KENT",
        "5AA3 7A81 F212 146C": "BODE HOP JAKE STOW JUT RAP",
        "F205 7539 43DE 4CF9": "ULAN NEW ARMY FUSE SUIT EYED",
        "DDCD AC95 6F23 4937": "SKIM CULT LOB SLAM POE HOWL",
        "B203 E28F A525 BE47": "LONG IVY JULY AJAR BOND LEE",
    },
    "rfc2289 sha1": {
        "BB9E 6AE1 979D 8FF4": "MILT VARY MAST OK SEES WENT",
        "63D9 3663 9734 385B": "CART OTTO HIVE ODE VAT NUT",
        "87FE C776 8B73 CCF9": "GAFF WAIT SKID GIG SKY EYED",
        "AD85 F658 EBE3 83C9": "LEST OR HEEL SCOT ROB SUIT",
        "D07C E229 B5CF 119B": "RITE TAKE GELD COST TUNE RECK",
        "27BC 7103 5AAF 3DC6": "MAY STAR TIN LYON VEDA STAN",
        "D51F 3E99 BF8E 6F0B": "RUST WELT KICK FELL TAIL FRAU",
        "82AE B52D 9437 74E4": "FLIT DOSE ALSO MEW DRUM DEFY",
        "4F29 6A74 FE15 67EC": "AURA ALOE HURL WING BERG WAIT",
    },
    "rfc 1751": {
        "EB33 F77E E73D 4053": "TIDE ITCH SLOW REIN RULE MOT",
        "CCAC 2AED 5910 56BE 4F90 FD44 1C53 4766":
            "RASH BUSH MILK LOOK BAD BRIM AVID GAFF BAIT ROT POD LOVE",
        "EFF8 1F9B FBC6 5350 920C DD74 16DE 8009":
            "TROD MUTE TAIL WARM CHAR KONG HAAG CITY BORE O TEAL AWL",
    },
}

# sentence -> whether it passes the parity check (RFC 2289)
PARITY_VECTORS = {
    "FOWL KID MASH DEAD DUAL OAF": True,
    "FOWL KID MASH DEAD DUAL NUT": False,
    "FOWL KID MASH DEAD DUAL O": False,
    "FOWL KID MASH DEAD DUAL OAK": False,
}

# bytes -> (lowercase, fingerprint, colons)
HEX_STYLE_VECTORS = {
    b"\x73\xe2\x16\xb5\x36\x3f\x23\x77": (
        "73e216b5363f2377",
        "73E2 16B5 363F 2377",
        "73:e2:16:b5:36:3f:23:77",
    ),
    b"\xfe\xfb\x90\x3d\x12\x59\x36\xee": (
        "fefb903d125936ee",
        "FEFB 903D 1259 36EE",
        "fe:fb:90:3d:12:59:36:ee",
    ),
    b"\x41\x2e\xb9\x92\xe8\x34\xe9\x90": (
        "412eb992e834e990",
        "412E B992 E834 E990",
        "41:2e:b9:92:e8:34:e9:90",
    ),
    b"\xd2\x6b\x73\x44\x17\xad\x7f\x93": (
        "d26b734417ad7f93",
        "D26B 7344 17AD 7F93",
        "d2:6b:73:44:17:ad:7f:93",
    ),
    b"\x34\x59\xa1\x13\x01\x94\xc3\xf6\xe8\xa9\xec\xf6\x44\xb5\xba\x41": (
        "3459a1130194c3f6e8a9ecf644b5ba41",
        "3459 A113 0194 C3F6 E8A9 ECF6 44B5 BA41",
        "34:59:a1:13:01:94:c3:f6:e8:a9:ec:f6:44:b5:ba:41",
    ),
    b"\x26\xb8\xdf\xd0\x00\x35\x98\xff\xec\x95\xc3\xa1\x1e\x64\x97\x08": (
        "26b8dfd0003598ffec95c3a11e649708",
        "26B8 DFD0 0035 98FF EC95 C3A1 1E64 9708",
        "26:b8:df:d0:00:35:98:ff:ec:95:c3:a1:1e:64:97:08",
    ),
}


def iter_hex_vectors():
    for _section, tests in HEX_VECTORS.items():
        for hex_text, sentence in tests.items():
            yield bytes.fromhex(hex_text.replace(" ", "")), sentence
