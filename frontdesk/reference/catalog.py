"""Read-only lookup tables consumed by the editors, screens and reports."""

NATIONALITIES = (
    "American",
    "British",
    "Canadian",
    "Australian",
    "German",
    "French",
    "Japanese",
    "Chinese",
    "Korean",
)

# ISO 3166-1 alpha-3 codes used by the registers
NATIONALITY_CODES = {
    "American": "USA",
    "British": "GBR",
    "Canadian": "CAN",
    "Australian": "AUS",
    "German": "DEU",
    "French": "FRA",
    "Japanese": "JPN",
    "Chinese": "CHN",
    "Korean": "KOR",
}

GENDERS = ("Male", "Female", "Other")

GUEST_TYPES = ("Adult", "Child", "Infant")

PAYMENT_STATUSES = ("Paid", "Pending", "Deposit Paid")

TM30_STATUSES = ("Pending Submission", "Submitted", "Acknowledged")

VISA_TYPES = (
    "Visa Exemption (ยกเว้นวีซ่า)",
    "Visa on Arrival (VOA)",
    "Tourist Visa (TR)",
    "Non-Immigrant (NON-B)",
    "Non-Immigrant (NON-ED)",
    "Non-Immigrant (NON-O)",
    "Non-Immigrant (NON-O-A)",
    "LTR Visa",
    "SMART Visa",
    "อื่นๆ (Others)",
)

DEFAULT_VISA_TYPE = "Tourist Visa (TR)"

GROUPED_PORTS_OF_ENTRY = (
    {
        "label": "✈️ Airports (ช่องทางอนุญาตทางอากาศ)",
        "options": (
            "ท่าอากาศยานสุวรรณภูมิ (Suvarnabhumi Airport)",
            "ท่าอากาศยานดอนเมือง (Don Mueang International Airport)",
            "ท่าอากาศยานเชียงใหม่ (Chiangmai International Airport)",
            "ท่าอากาศยานภูเก็ต (Phuket International Airport)",
            "ท่าอากาศยานหาดใหญ่ (Hatyai International Airport)",
            "ท่าอากาศยานอู่ตะภา (U Tapao Airport)",
            "ท่าอากาศยานสมุย (Samui Airport)",
            "ท่าอากาศยานกระบี่ (Krabi Airport)",
            "ท่าอากาศยานเชียงราย (Chiangrai Airport)",
            "ท่าอากาศยานสุราษฎร์ธานี (Surat Thani Airport)",
            "ท่าอากาศยานสุโขทัย (Sukhothai International Airport)",
        ),
    },
    {
        "label": "🚗 Land Border Checkpoints (ช่องทางอนุญาตทางบก)",
        "options": (
            "ด่าน ตม. สะเดา (สงขลา)",
            "ด่าน ตม. หนองคาย",
            "ด่าน ตม. อรัญประเทศ (สระแก้ว)",
            "ด่าน ตม. แม่สาย (เชียงราย)",
            "ด่าน ตม. เบตง (ยะลา)",
            "ด่าน ตม. ปาดังเบซาร์ (สงขลา)",
            "ด่าน ตม. สุไหงโก-ลก (นราธิวาส)",
            "ด่าน ตม. เชียงแสน (เชียงราย)",
            "ด่าน ตม. เชียงของ (เชียงราย)",
            "ด่าน ตม. มุกดาหาร",
            "ด่าน ตม. ตาก (แม่สอด)",
            "ด่าน ตม. คลองใหญ่ (ตราด)",
            "ด่าน ตม. ช่องจอม (สุรินทร์)",
            "ด่าน ตม. ภูสิงห์ (ศรีสะเกษ)",
            "ด่าน ตม. ท่าลี่ (เลย)",
            "ด่าน ตม. นครพนม",
            "ด่าน ตม. บึงกาฬ",
        ),
    },
    {
        "label": "🚢 Sea/River Ports (ช่องทางอนุญาตทางน้ำ)",
        "options": (
            "ท่าเรือกรุงเทพ (Bangkok Harbour)",
            "ท่าเรือแหลมฉบัง (ชลบุรี)",
            "ท่าเรือศรีราชา (ชลบุรี)",
            "ท่าเรือมาบตาพุด (ระยอง)",
            "ท่าเรือสมุย (สุราษฎร์ธานี)",
            "ท่าเรือภูเก็ต",
            "ท่าเรือสตูล (ด่าน ตม. ตำมะลัง)",
            "ท่าเรือสงขลา",
            "ท่าเรือกระบี่",
        ),
    },
)

ALL_PORTS_OF_ENTRY = tuple(
    option for group in GROUPED_PORTS_OF_ENTRY for option in group["options"]
)

ROOM_TYPES = ("Standard", "Superior", "Deluxe", "Connecting")

BED_TYPES = ("King Bed", "Queen Bed", "Twin Bed", "Single Bed")

ROOM_PRICES = {
    "Standard": 1000,
    "Superior": 1500,
    "Deluxe": 2000,
    "Connecting": 2500,
}
