# repository/surah_repository.py
from typing import Final, Optional
from model.quran import SurahMeta

_SURAH_ROWS: Final[tuple[tuple[int, str, str, int, str], ...]] = (
    (1, "Al-Fatihah", "The Opening", 7, "Pembukaan"),
    (2, "Al-Baqarah", "The Cow", 286, "Sapi Betina"),
    (3, "Ali 'Imran", "Family of Imran", 200, "Keluarga Imran"),
    (4, "An-Nisa'", "The Women", 176, "Wanita"),
    (5, "Al-Ma'idah", "The Table Spread", 120, "Hidangan"),
    (6, "Al-An'am", "The Cattle", 165, "Binatang Ternak"),
    (7, "Al-A'raf", "The Heights", 206, "Tempat Tertinggi"),
    (8, "Al-Anfal", "The Spoils of War", 75, "Rampasan Perang"),
    (9, "At-Taubah", "The Repentance", 129, "Pengampunan"),
    (10, "Yunus", "Jonah", 109, "Nabi Yunus"),
    (11, "Hud", "Hud", 123, "Nabi Hud"),
    (12, "Yusuf", "Joseph", 111, "Nabi Yusuf"),
    (13, "Ar-Ra'd", "The Thunder", 43, "Guruh"),
    (14, "Ibrahim", "Abraham", 52, "Nabi Ibrahim"),
    (15, "Al-Hijr", "The Rocky Tract", 99, "Gunung Al-Hijr"),
    (16, "An-Nahl", "The Bee", 128, "Lebah"),
    (17, "Al-Isra'", "The Night Journey", 111, "Perjalanan Malam"),
    (18, "Al-Kahf", "The Cave", 110, "Gua"),
    (19, "Maryam", "Mary", 98, "Maryam"),
    (20, "Taha", "Ta-Ha", 135, "Taha"),
    (21, "Al-Anbiya'", "The Prophets", 112, "Para Nabi"),
    (22, "Al-Hajj", "The Pilgrimage", 78, "Haji"),
    (23, "Al-Mu'minun", "The Believers", 118, "Orang-Orang Mukmin"),
    (24, "An-Nur", "The Light", 64, "Cahaya"),
    (25, "Al-Furqan", "The Criterion", 77, "Pembeda"),
    (26, "Asy-Syu'ara'", "The Poets", 227, "Para Penyair"),
    (27, "An-Naml", "The Ant", 93, "Semut"),
    (28, "Al-Qasas", "The Stories", 88, "Kisah-Kisah"),
    (29, "Al-'Ankabut", "The Spider", 69, "Laba-Laba"),
    (30, "Ar-Rum", "The Romans", 60, "Bangsa Romawi"),
    (31, "Luqman", "Luqman", 34, "Keluarga Luqman"),
    (32, "As-Sajdah", "The Prostration", 30, "Sajdah"),
    (33, "Al-Ahzab", "The Combined Forces", 73, "Golongan yang Bersekutu"),
    (34, "Saba'", "Sheba", 54, "Kaum Saba'"),
    (35, "Fatir", "Originator", 45, "Pencipta"),
    (36, "Yasin", "Ya-Sin", 83, "Yasin"),
    (37, "As-Saffat", "Those Who Set the Ranks", 182, "Barisan-Barisan"),
    (38, "Sad", "The Letter Sad", 88, "Sad"),
    (39, "Az-Zumar", "The Troops", 75, "Rombongan-Rombongan"),
    (40, "Ghafir", "The Forgiver", 85, "Yang Maha Pengampun"),
    (41, "Fussilat", "Explained in Detail", 54, "Yang Dijelaskan"),
    (42, "Asy-Syura", "The Consultation", 53, "Musyawarah"),
    (43, "Az-Zukhruf", "The Ornaments of Gold", 89, "Perhiasan"),
    (44, "Ad-Dukhan", "The Smoke", 59, "Kabut"),
    (45, "Al-Jasiyah", "The Crouching", 37, "Yang Berlutut"),
    (46, "Al-Ahqaf", "The Wind-Curved Sandhills", 35, "Bukit-Bukit Pasir"),
    (47, "Muhammad", "Muhammad", 38, "Nabi Muhammad"),
    (48, "Al-Fath", "The Victory", 29, "Kemenangan"),
    (49, "Al-Hujurat", "The Rooms", 18, "Kamar-Kamar"),
    (50, "Qaf", "The Letter Qaf", 45, "Qaf"),
    (51, "Az-Zariyat", "The Winnowing Winds", 60, "Angin yang Menerbangkan"),
    (52, "At-Tur", "The Mount", 49, "Bukit"),
    (53, "An-Najm", "The Star", 62, "Bintang"),
    (54, "Al-Qamar", "The Moon", 55, "Bulan"),
    (55, "Ar-Rahman", "The Beneficent", 78, "Yang Maha Pengasih"),
    (56, "Al-Waqi'ah", "The Inevitable", 96, "Hari Kiamat"),
    (57, "Al-Hadid", "The Iron", 29, "Besi"),
    (58, "Al-Mujadilah", "The Pleading Woman", 22, "Gugatan"),
    (59, "Al-Hasyr", "The Exile", 24, "Pengusiran"),
    (60, "Al-Mumtahanah", "She That Is to Be Examined", 13, "Wanita yang Diuji"),
    (61, "As-Saff", "The Ranks", 14, "Barisan"),
    (62, "Al-Jumu'ah", "The Congregation", 11, "Hari Jumat"),
    (63, "Al-Munafiqun", "The Hypocrites", 11, "Orang-Orang Munafik"),
    (64, "At-Tagabun", "The Mutual Disillusion", 18, "Hari Ditampakkan Kesalahan"),
    (65, "At-Talaq", "The Divorce", 12, "Talak"),
    (66, "At-Tahrim", "The Prohibition", 12, "Pengharaman"),
    (67, "Al-Mulk", "The Sovereignty", 30, "Kerajaan"),
    (68, "Al-Qalam", "The Pen", 52, "Pena"),
    (69, "Al-Haqqah", "The Reality", 52, "Hari Kiamat"),
    (70, "Al-Ma'arij", "The Ascending Stairways", 44, "Tempat-Tempat Naik"),
    (71, "Nuh", "Noah", 28, "Nabi Nuh"),
    (72, "Al-Jinn", "The Jinn", 28, "Jin"),
    (73, "Al-Muzzammil", "The Enshrouded One", 20, "Orang yang Berselimut"),
    (74, "Al-Muddassir", "The Cloaked One", 56, "Orang yang Berkemul"),
    (75, "Al-Qiyamah", "The Resurrection", 40, "Hari Kiamat"),
    (76, "Al-Insan", "The Man", 31, "Manusia"),
    (77, "Al-Mursalat", "The Emissaries", 50, "Malaikat-Malaikat yang Diutus"),
    (78, "An-Naba'", "The Tidings", 40, "Berita Besar"),
    (79, "An-Nazi'at", "Those Who Drag Forth", 46, "Malaikat-Malaikat yang Mencabut"),
    (80, "'Abasa", "He Frowned", 42, "Bermuka Masam"),
    (81, "At-Takwir", "The Overthrowing", 29, "Menggulung"),
    (82, "Al-Infitar", "The Cleaving", 19, "Terbelah"),
    (83, "Al-Mutaffifin", "The Defrauding", 36, "Orang-Orang yang Curang"),
    (84, "Al-Insyiqaq", "The Sundering", 25, "Terbelah"),
    (85, "Al-Buruj", "The Mansions of the Stars", 22, "Gugusan Bintang"),
    (86, "At-Tariq", "The Nightcomer", 17, "Yang Datang di Malam Hari"),
    (87, "Al-A'la", "The Most High", 19, "Yang Paling Tinggi"),
    (88, "Al-Gasyiyah", "The Overwhelming", 26, "Hari Pembalasan"),
    (89, "Al-Fajr", "The Dawn", 30, "Fajar"),
    (90, "Al-Balad", "The City", 20, "Negeri"),
    (91, "Asy-Syams", "The Sun", 15, "Matahari"),
    (92, "Al-Lail", "The Night", 21, "Malam"),
    (93, "Ad-Duha", "The Morning Hours", 11, "Waktu Duha"),
    (94, "Asy-Syarh", "The Relief", 8, "Lapang"),
    (95, "At-Tin", "The Fig", 8, "Buah Tin"),
    (96, "Al-'Alaq", "The Clot", 19, "Segumpal Darah"),
    (97, "Al-Qadr", "The Power", 5, "Kemuliaan"),
    (98, "Al-Bayyinah", "The Clear Proof", 8, "Bukti Nyata"),
    (99, "Az-Zalzalah", "The Earthquake", 8, "Goncangan"),
    (100, "Al-'Adiyat", "The Courser", 11, "Kuda Perang yang Berlari Kencang"),
    (101, "Al-Qari'ah", "The Calamity", 11, "Hari Kiamat"),
    (102, "At-Takasur", "The Rivalry in World Increase", 8, "Bermegah-Megahan"),
    (103, "Al-'Asr", "The Declining Day", 3, "Masa"),
    (104, "Al-Humazah", "The Traducer", 9, "Pengumpat"),
    (105, "Al-Fil", "The Elephant", 5, "Gajah"),
    (106, "Quraisy", "Quraysh", 4, "Suku Quraisy"),
    (107, "Al-Ma'un", "The Small Kindnesses", 7, "Barang yang Berguna"),
    (108, "Al-Kausar", "The Abundance", 3, "Nikmat yang Banyak"),
    (109, "Al-Kafirun", "The Disbelievers", 6, "Orang-Orang Kafir"),
    (110, "An-Nasr", "The Divine Support", 3, "Pertolongan"),
    (111, "Al-Lahab", "The Palm Fiber", 5, "Gejolak Api"),
    (112, "Al-Ikhlas", "The Sincerity", 4, "Ikhlas"),
    (113, "Al-Falaq", "The Daybreak", 5, "Waktu Subuh"),
    (114, "An-Nas", "Mankind", 6, "Manusia"),
)

# Process-wide, built once at import and never mutated.
SURAHS: Final[tuple[SurahMeta, ...]] = tuple(
    SurahMeta(number=n, name=name, englishName=en, verseCount=count, meaning=meaning)
    for n, name, en, count, meaning in _SURAH_ROWS
)

_BY_NUMBER: Final[dict[int, SurahMeta]] = {s.number: s for s in SURAHS}


class SurahRepository:
    """
    Read-only view over the static surah table.
    """

    @staticmethod
    def all() -> tuple[SurahMeta, ...]:
        return SURAHS

    @staticmethod
    def get(number: int) -> Optional[SurahMeta]:
        return _BY_NUMBER.get(number)

    @staticmethod
    def search(query: str | None) -> list[SurahMeta]:
        """
        Case-insensitive match on name or englishName, or substring match on the number.
        Blank query returns the full index.
        """
        q = (query or "").strip().lower()
        if not q:
            return list(SURAHS)
        return [
            s
            for s in SURAHS
            if q in s.name.lower() or q in s.englishName.lower() or q in str(s.number)
        ]
