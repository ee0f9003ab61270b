"""Multilingual keyword tables for the relevance filter.

Matching is substring-based on the lowercased question, so entries are kept
lowercase. Duplicates across languages are harmless.
"""

RELEVANCE_KEYWORDS: tuple[str, ...] = (
    # English keywords
    "work", "job", "employer", "employee", "salary", "wage", "pay", "overtime",
    "leave", "contract", "passport", "visa", "permit", "migrant", "foreign worker",
    "rights", "law", "legal", "labour", "labor", "safety", "hours", "accommodation",
    "complaint", "dispute", "termination", "resign", "annual leave", "sick leave",
    "malaysia", "employment act", "minimum wage", "working hours", "rest day",
    "ngo", "organization", "support", "help", "assistance", "aid", "charity",
    "human rights", "advocacy", "protection", "welfare", "community",
    "statistics", "data", "number", "workers", "migration", "state", "states",
    "population", "demographics", "distribution", "selangor", "kl", "kuala lumpur",
    "johor", "penang", "perak", "sabah", "sarawak", "pahang", "kelantan", "terengganu",
    "melaka", "negeri sembilan", "kedah", "perlis", "labuan", "putrajaya",
    "exploitation", "abuse", "harassment", "discrimination", "unfair", "unpaid",
    "deduction", "fine", "penalty", "threat", "intimidation", "retaliation",
    "health", "medical", "doctor", "hospital", "injury", "accident", "insurance",
    "housing", "living", "accommodation", "dormitory", "hostel", "room", "bed",
    "food", "meal", "canteen", "transport", "travel", "bus", "vehicle",
    "document", "paper", "certificate", "medical check", "health screening",
    "recruitment", "agency", "agent", "fee", "commission", "debt", "bondage",
    "union", "association", "collective", "bargaining", "strike", "protest",
    "court", "tribunal", "arbitration", "mediation", "conciliation",
    "department", "ministry", "authority", "government", "official",
    "emergency", "crisis", "helpline", "hotline", "counseling", "advice",
    "calculator", "calculation", "compute", "figure", "amount", "total",
    "holiday", "festival", "public holiday", "religious", "cultural",
    "training", "skill", "education", "qualification", "certification",
    "family", "dependent", "child", "spouse", "marriage", "relationship",
    "repatriation", "deportation", "exit", "return", "home country",
    "extension", "renewal", "expiry", "validity", "duration", "period",
    "violation", "breach", "offense", "crime", "illegal", "unlawful",
    "compensation", "benefit", "entitlement", "allowance", "bonus",
    "overtime pay", "night shift", "weekend", "holiday work", "extra hours",
    "working condition", "environment", "facility", "equipment", "tool",
    "safety gear", "protective", "helmet", "gloves", "mask", "uniform",
    "cleanliness", "hygiene", "sanitation", "toilet", "bathroom", "shower",
    "water", "electricity", "air conditioning", "ventilation", "lighting",
    "rest area", "break", "lunch", "meal time", "refreshment",
    "communication", "language", "translation", "interpreter", "explain",
    "understand", "confusion", "misunderstanding", "clarification",
    "procedure", "process", "step", "method", "way", "how to", "what to do",
    "information", "knowledge", "awareness", "education", "training",
    "problem", "issue", "difficulty", "challenge", "trouble", "concern",
    "solution", "resolution", "settlement", "agreement", "compromise",
    "justice", "fairness", "equality", "dignity", "respect", "treatment",

    # Bahasa Malaysia keywords
    "gaji", "upah", "kerja", "majikan", "pekerja", "cuti", "kontrak", "pasport",
    "hak", "undang", "buruh", "keselamatan", "penginapan", "aduan", "permit",
    "pekerja asing", "migran", "organisasi", "bantuan", "sokongan", "komuniti",
    "statistik", "data", "bilangan", "negeri", "populasi", "selangor", "johor",
    "pulau pinang", "perak", "sabah", "sarawak", "pahang", "kelantan", "terengganu",
    "melaka", "negeri sembilan", "kedah", "perlis", "labuan", "putrajaya",
    "visa", "pasport", "dokumen", "imigresen", "pembaharuan", "kad kerja",
    "permit kerja", "kad pengenalan", "dokumen perjalanan", "imigresen",
    "eksploitasi", "penderaan", "gangguan", "diskriminasi", "tidak adil", "tidak dibayar",
    "potongan", "denda", "penalti", "ancaman", "ugutan", "balas dendam",
    "kesihatan", "perubatan", "doktor", "hospital", "kecederaan", "kemalangan", "insurans",
    "perumahan", "tempat tinggal", "penginapan", "asrama", "hostel", "bilik", "katil",
    "makanan", "makan", "kantin", "pengangkutan", "perjalanan", "bas", "kenderaan",
    "dokumen", "kertas", "sijil", "pemeriksaan perubatan", "saringan kesihatan",
    "pengambilan", "agensi", "ejen", "yuran", "komisen", "hutang", "perhambaan",
    "kesatuan", "persatuan", "kolektif", "tawar-menawar", "mogok", "protes",
    "mahkamah", "tribunal", "arbitrasi", "pengantaraan", "pendamaian",
    "jabatan", "kementerian", "pihak berkuasa", "kerajaan", "pegawai",
    "kecemasan", "krisis", "talian bantuan", "hotline", "kaunseling", "nasihat",
    "kalkulator", "pengiraan", "kira", "angka", "jumlah", "keseluruhan",
    "percutian", "perayaan", "cuti umum", "agama", "budaya",
    "latihan", "kemahiran", "pendidikan", "kelayakan", "pensijilan",
    "keluarga", "tanggungan", "anak", "pasangan", "perkahwinan", "hubungan",
    "pemulangan", "penghantaran balik", "keluar", "pulang", "negara asal",
    "lanjutan", "pembaharuan", "tamat tempoh", "kesahihan", "tempoh", "jangka masa",
    "pelanggaran", "pelanggaran", "kesalahan", "jenayah", "haram", "tidak sah",
    "pampasan", "faedah", "hak", "elaun", "bonus",
    "bayaran lebih masa", "shift malam", "hujung minggu", "kerja cuti", "jam tambahan",
    "keadaan kerja", "persekitaran", "kemudahan", "peralatan", "alat",
    "perlindungan keselamatan", "pelindung", "topi keledar", "sarung tangan", "topeng", "uniform",
    "kebersihan", "higien", "sanitasi", "tandas", "bilik air", "mandi",
    "air", "elektrik", "penghawa dingin", "pengudaraan", "pencahayaan",
    "kawasan rehat", "rehat", "makan tengah hari", "waktu makan", "minuman",
    "komunikasi", "bahasa", "terjemahan", "penterjemah", "terangkan",
    "faham", "kekeliruan", "salah faham", "penjelasan",
    "prosedur", "proses", "langkah", "kaedah", "cara", "bagaimana", "apa yang perlu dilakukan",
    "maklumat", "pengetahuan", "kesedaran", "pendidikan", "latihan",
    "masalah", "isu", "kesukaran", "cabaran", "masalah", "kebimbangan",
    "penyelesaian", "penyelesaian", "penyelesaian", "perjanjian", "kompromi",
    "keadilan", "keadilan", "kesaksamaan", "maruah", "hormat", "rawatan",

    # Nepali keywords
    "तलब", "काम", "मालिक", "कर्मचारी", "छुट्टी", "अनुबन्ध", "राहदानी", "अधिकार",
    "कानून", "श्रम", "सुरक्षा", "आवास", "शिकायत", "अनुमति", "विदेशी कामदार",
    "संगठन", "सहायता", "समर्थन", "समुदाय", "तथ्याङ्क", "संख्या", "राज्य",
    "भिसा", "पासपोर्ट", "कागजात", "आप्रवासन", "नवीकरण", "काम कार्ड",
    "काम अनुमति", "पहिचान कार्ड", "यात्रा कागजात", "आप्रवास",
    "शोषण", "दुर्व्यवहार", "उत्पीडन", "भेदभाव", "अन्याय", "अवैतनिक",
    "कटौती", "जरिवाना", "सजाय", "धम्की", "डराउने", "प्रतिशोध",
    "स्वास्थ्य", "चिकित्सा", "डाक्टर", "अस्पताल", "चोट", "दुर्घटना", "बीमा",
    "आवास", "बसोबास", "रहन सहन", "छात्रावास", "होस्टेल", "कोठा", "खाट",
    "खाना", "भोजन", "क्यान्टिन", "यातायात", "यात्रा", "बस", "सवारी",
    "कागजात", "कागज", "प्रमाणपत्र", "चिकित्सा जाँच", "स्वास्थ्य जाँच",
    "भर्ती", "एजेन्सी", "एजेन्ट", "शुल्क", "कमिसन", "ऋण", "बन्धन",
    "संघ", "संस्था", "सामूहिक", "सौदा", "हडताल", "प्रदर्शन",
    "अदालत", "ट्रिब्युनल", "मध्यस्थता", "मध्यस्थता", "सुलह",
    "विभाग", "मन्त्रालय", "अधिकार", "सरकार", "अधिकारी",
    "आपतकाल", "संकट", "हेल्पलाइन", "हटलाइन", "काउन्सेलिंग", "सल्लाह",
    "क्यालकुलेटर", "गणना", "गणना", "अंक", "रकम", "कुल",
    "छुट्टी", "पर्व", "सार्वजनिक छुट्टी", "धार्मिक", "सांस्कृतिक",
    "प्रशिक्षण", "कौशल", "शिक्षा", "योग्यता", "प्रमाणीकरण",
    "परिवार", "आश्रित", "बच्चा", "जीवनसाथी", "विवाह", "सम्बन्ध",
    "प्रत्यावर्तन", "निर्वासन", "निकास", "फर्कनु", "गृह देश",
    "विस्तार", "नवीकरण", "म्याद सकिनु", "वैधता", "अवधि", "समय",
    "उल्लंघन", "उल्लंघन", "अपराध", "अपराध", "अवैध", "गैरकानूनी",
    "मुआवजा", "लाभ", "अधिकार", "भत्ता", "बोनस",
    "ओभरटाइम भुक्तानी", "रातो शिफ्ट", "सप्ताहान्त", "छुट्टीको काम", "थप घण्टा",
    "कामको अवस्था", "वातावरण", "सुविधा", "उपकरण", "साधन",
    "सुरक्षा उपकरण", "सुरक्षात्मक", "हेल्मेट", "हातेसुन", "मास्क", "युनिफर्म",
    "सफाइ", "स्वच्छता", "स्वच्छता", "ट्वाइलेट", "बाथरुम", "शावर",
    "पानी", "बिजुली", "एयर कन्डिसनिंग", "भेन्टिलेसन", "प्रकाश",
    "आराम क्षेत्र", "ब्रेक", "लन्च", "खानाको समय", "जलपान",
    "संचार", "भाषा", "अनुवाद", "दोभाषी", "व्याख्या",
    "बुझ्नु", "भ्रम", "गलतफहमी", "स्पष्टीकरण",
    "प्रक्रिया", "प्रक्रिया", "चरण", "विधि", "बाटो", "कसरी", "के गर्ने",
    "जानकारी", "ज्ञान", "जागरूकता", "शिक्षा", "प्रशिक्षण",
    "समस्या", "मुद्दा", "कठिनाइ", "चुनौती", "समस्या", "चिन्ता",
    "समाधान", "समाधान", "निपटान", "सम्झौता", "समझदारी",
    "न्याय", "निष्पक्षता", "समानता", "गौरव", "सम्मान", "व्यवहार",

    # Hindi keywords
    "वेतन", "काम", "मालिक", "कर्मचारी", "छुट्टी", "अनुबंध", "पासपोर्ट", "अधिकार",
    "कानून", "श्रम", "सुरक्षा", "आवास", "शिकायत", "अनुमति", "विदेशी कामगार",
    "संगठन", "सहायता", "समर्थन", "समुदाय", "आंकड़े", "संख्या", "राज्य",
    "वीज़ा", "पासपोर्ट", "दस्तावेज़", "आप्रवासन", "नवीनीकरण", "कार्ड",
    "कार्य अनुमति", "पहचान पत्र", "यात्रा दस्तावेज़", "आप्रवास",
    "शोषण", "दुर्व्यवहार", "उत्पीड़न", "भेदभाव", "अनुचित", "अवैतनिक",
    "कटौती", "जुर्माना", "दंड", "धमकी", "डराना", "प्रतिशोध",
    "स्वास्थ्य", "चिकित्सा", "डॉक्टर", "अस्पताल", "चोट", "दुर्घटना", "बीमा",
    "इंश्योरेंस", "सुरक्षा", "सोशल सिक्योरिटी", "सोसो", "सोशल सिक्योरिटी ऑर्गनाइजेशन",
    "स्वास्थ्य बीमा", "हेल्थ इंश्योरेंस", "स्वास्थ्य सुरक्षा", "चिकित्सा बीमा",
    "कर्मचारी बीमा", "वर्कमैन कम्पेनसेशन", "दुर्घटना बीमा", "एक्सीडेंट इंश्योरेंस",
    "सोशल सिक्योरिटी", "सामाजिक सुरक्षा", "सोसो कवरेज", "सोसो रजिस्ट्रेशन",
    "स्वास्थ्य लाभ", "मेडिकल बेनिफिट", "चिकित्सा लाभ", "स्वास्थ्य सुविधा",
    "बीमा कवरेज", "इंश्योरेंस कवरेज", "बीमा योजना", "इंश्योरेंस प्लान",
    "स्वास्थ्य सुरक्षा योजना", "हेल्थ प्रोटेक्शन प्लान", "चिकित्सा सुरक्षा",
    "सोसो लाभ", "सोसो बेनिफिट", "सोशल सिक्योरिटी लाभ", "सामाजिक सुरक्षा लाभ",
    "कर्मचारी सुरक्षा", "वर्कर सेफ्टी", "कामगार सुरक्षा", "श्रमिक सुरक्षा",
    "आवास", "रहने", "आवास", "छात्रावास", "होस्टल", "कमरा", "बिस्तर",
    "भोजन", "खाना", "कैंटीन", "परिवहन", "यात्रा", "बस", "वाहन",
    "दस्तावेज़", "कागज", "प्रमाणपत्र", "चिकित्सा जांच", "स्वास्थ्य जांच",
    "भर्ती", "एजेंसी", "एजेंट", "शुल्क", "कमीशन", "कर्ज", "बंधन",
    "संघ", "संस्था", "सामूहिक", "सौदा", "हड़ताल", "प्रदर्शन",
    "अदालत", "ट्रिब्यूनल", "मध्यस्थता", "मध्यस्थता", "सुलह",
    "विभाग", "मंत्रालय", "अधिकार", "सरकार", "अधिकारी",
    "आपातकाल", "संकट", "हेल्पलाइन", "हॉटलाइन", "काउंसलिंग", "सलाह",
    "कैलकुलेटर", "गणना", "गणना", "अंक", "रकम", "कुल",
    "छुट्टी", "त्योहार", "सार्वजनिक छुट्टी", "धार्मिक", "सांस्कृतिक",
    "प्रशिक्षण", "कौशल", "शिक्षा", "योग्यता", "प्रमाणन",
    "परिवार", "आश्रित", "बच्चा", "जीवनसाथी", "शादी", "रिश्ता",
    "प्रत्यावर्तन", "निर्वासन", "निकास", "वापसी", "मूल देश",
    "विस्तार", "नवीनीकरण", "समाप्ति", "वैधता", "अवधि", "समय",
    "उल्लंघन", "उल्लंघन", "अपराध", "अपराध", "अवैध", "गैरकानूनी",
    "मुआवजा", "लाभ", "अधिकार", "भत्ता", "बोनस",
    "ओवरटाइम भुगतान", "रात की शिफ्ट", "सप्ताहांत", "छुट्टी का काम", "अतिरिक्त घंटे",
    "काम की स्थिति", "वातावरण", "सुविधा", "उपकरण", "उपकरण",
    "सुरक्षा उपकरण", "सुरक्षात्मक", "हेलमेट", "दस्ताने", "मास्क", "वर्दी",
    "सफाई", "स्वच्छता", "स्वच्छता", "टॉयलेट", "बाथरूम", "शावर",
    "पानी", "बिजली", "एयर कंडीशनिंग", "वेंटिलेशन", "प्रकाश",
    "आराम क्षेत्र", "ब्रेक", "लंच", "खाने का समय", "जलपान",
    "संचार", "भाषा", "अनुवाद", "दुभाषिया", "समझाएं",
    "समझना", "भ्रम", "गलतफहमी", "स्पष्टीकरण",
    "प्रक्रिया", "प्रक्रिया", "चरण", "विधि", "तरीका", "कैसे", "क्या करें",
    "जानकारी", "ज्ञान", "जागरूकता", "शिक्षा", "प्रशिक्षण",
    "समस्या", "मुद्दा", "कठिनाई", "चुनौती", "मुसीबत", "चिंता",
    "समाधान", "समाधान", "निपटान", "समझौता", "समझौता",
    "न्याय", "निष्पक्षता", "समानता", "गरिमा", "सम्मान", "व्यवहार",

    # Bengali keywords
    "বেতন", "কাজ", "নিয়োগকর্তা", "কর্মচারী", "ছুটি", "চুক্তি", "পাসপোর্ট", "অধিকার",
    "আইন", "শ্রম", "নিরাপত্তা", "আবাসন", "অভিযোগ", "অনুমতি", "বিদেশী কর্মী",
    "সংগঠন", "সাহায্য", "সমর্থন", "সম্প্রদায়", "পরিসংখ্যান", "সংখ্যা", "রাজ্য",
    "ভিসা", "পাসপোর্ট", "নথি", "অভিবাসন", "নবায়ন", "কাজের কার্ড",
    "কাজের অনুমতি", "পরিচয়পত্র", "ভ্রমণ নথি", "অভিবাসন", "থাকার", "জায়গা",
    "বাসস্থান", "বাথরুম", "টয়লেট", "স্বাস্থ্য", "পরিষ্কার", "বাসা", "ঘর",
    "শোষণ", "নির্যাতন", "হয়রানি", "বৈষম্য", "অন্যায্য", "অবৈতনিক",
    "কাটছাঁট", "জরিমানা", "শাস্তি", "হুমকি", "ভয় দেখানো", "প্রতিশোধ",
    "স্বাস্থ্য", "চিকিত্সা", "ডাক্তার", "হাসপাতাল", "আঘাত", "দুর্ঘটনা", "বীমা",
    "আবাসন", "বাসস্থান", "আবাসন", "ছাত্রাবাস", "হোস্টেল", "ঘর", "বিছানা",
    "খাবার", "খাদ্য", "ক্যান্টিন", "পরিবহন", "ভ্রমণ", "বাস", "যানবাহন",
    "নথি", "কাগজ", "সনদ", "চিকিত্সা পরীক্ষা", "স্বাস্থ্য পরীক্ষা",
    "নিয়োগ", "এজেন্সি", "এজেন্ট", "ফি", "কমিশন", "ঋণ", "বন্ধন",
    "ইউনিয়ন", "সমিতি", "সমষ্টিগত", "দরকষাকষি", "ধর্মঘট", "বিক্ষোভ",
    "আদালত", "ট্রাইব্যুনাল", "সালিশ", "মধ্যস্থতা", "সমন্বয়",
    "বিভাগ", "মন্ত্রণালয়", "কর্তৃপক্ষ", "সরকার", "কর্মকর্তা",
    "জরুরী অবস্থা", "সংকট", "হেল্পলাইন", "হটলাইন", "কাউন্সেলিং", "পরামর্শ",
    "ক্যালকুলেটর", "গণনা", "গণনা", "সংখ্যা", "পরিমাণ", "মোট",
    "ছুটি", "উৎসব", "সরকারি ছুটি", "ধর্মীয়", "সাংস্কৃতিক",
    "প্রশিক্ষণ", "দক্ষতা", "শিক্ষা", "যোগ্যতা", "সনদপত্র",
    "পরিবার", "নির্ভরশীল", "শিশু", "স্বামী/স্ত্রী", "বিবাহ", "সম্পর্ক",
    "প্রত্যাবর্তন", "বিতাড়ন", "প্রস্থান", "ফেরত", "মাতৃভূমি",
    "সম্প্রসারণ", "নবায়ন", "মেয়াদ শেষ", "বৈধতা", "সময়সীমা", "সময়",
    "লঙ্ঘন", "লঙ্ঘন", "অপরাধ", "অপরাধ", "অবৈধ", "বেআইনি",
    "ক্ষতিপূরণ", "সুবিধা", "অধিকার", "ভাতা", "বোনাস",
    "ওভারটাইম বেতন", "রাতের শিফট", "সপ্তাহান্ত", "ছুটির কাজ", "অতিরিক্ত ঘণ্টা",
    "কাজের অবস্থা", "পরিবেশ", "সুবিধা", "সরঞ্জাম", "যন্ত্র",
    "নিরাপত্তা সরঞ্জাম", "সুরক্ষামূলক", "হেলমেট", "গ্লাভস", "মাস্ক", "ইউনিফর্ম",
    "পরিষ্কার-পরিচ্ছন্নতা", "স্বাস্থ্যবিধি", "স্যানিটেশন", "টয়লেট", "বাথরুম", "শাওয়ার",
    "পানি", "বিদ্যুৎ", "এয়ার কন্ডিশনার", "বায়ুচলাচল", "আলো",
    "বিশ্রাম এলাকা", "বিরতি", "লাঞ্চ", "খাবারের সময়", "জলখাবার",
    "যোগাযোগ", "ভাষা", "অনুবাদ", "দোভাষী", "ব্যাখ্যা",
    "বুঝতে", "বিভ্রান্তি", "ভুল বোঝাবুঝি", "স্পষ্টীকরণ",
    "পদ্ধতি", "প্রক্রিয়া", "ধাপ", "পদ্ধতি", "উপায়", "কিভাবে", "কি করতে হবে",
    "তথ্য", "জ্ঞান", "সচেতনতা", "শিক্ষা", "প্রশিক্ষণ",
    "সমস্যা", "ইস্যু", "কষ্ট", "চ্যালেঞ্জ", "কষ্ট", "উদ্বেগ",
    "সমাধান", "সমাধান", "নিষ্পত্তি", "চুক্তি", "সমঝোতা",
    "ন্যায়বিচার", "ন্যায্যতা", "সমতা", "মর্যাদা", "সম্মান", "আচরণ",
    # Additional Bengali keywords for minimum wage and salary
    "সর্বনিম্ন মজুরি", "সর্বনিম্ন বেতন", "মজুরি", "মালয়েশিয়া", "মালয়েশিয়ায়",
    "কত", "কি", "কিভাবে", "কোথায়", "কখন", "কেন", "কার", "কাকে",
    "নূন্যতম বেতন", "নূন্যতম মজুরি", "বেসিক বেতন", "বেসিক মজুরি",
    "রিঙ্গিত", "রিংগিত", "টাকা", "মুদ্রা", "দাম", "মূল্য",
    "কর্মঘণ্টা", "কাজের সময়", "শিফট", "শিফটের সময়",
    "বেতন কাঠামো", "মজুরি কাঠামো", "বেতন স্কেল", "মজুরি স্কেল",
    "বেতন বৃদ্ধি", "মজুরি বৃদ্ধি", "বেতন কম", "মজুরি কম",
    "বেতন বেশি", "মজুরি বেশি", "বেতন দেওয়া", "মজুরি দেওয়া",
    "বেতন পাওয়া", "মজুরি পাওয়া", "বেতন না পাওয়া", "মজুরি না পাওয়া",
    "বেতন বন্ধ", "মজুরি বন্ধ", "বেতন দেরি", "মজুরি দেরি",
    "বেতন কমানো", "মজুরি কমানো", "বেতন বাড়ানো", "মজুরি বাড়ানো",
    "বেতন ভাতা", "মজুরি ভাতা", "বেতন সুবিধা", "মজুরি সুবিধা",
    "বেতন ক্যালকুলেটর", "মজুরি ক্যালকুলেটর", "বেতন গণনা", "মজুরি গণনা",
    "বেতন হিসাব", "মজুরি হিসাব", "বেতন পরিশোধ", "মজুরি পরিশোধ",
    "বেতন তারিখ", "মজুরি তারিখ", "বেতন মাস", "মজুরি মাস",
    "বেতন বছর", "মজুরি বছর", "বেতন কিস্তি", "মজুরি কিস্তি",
    "বেতন চেক", "মজুরি চেক", "বেতন স্লিপ", "মজুরি স্লিপ",
    "বেতন রসিদ", "মজুরি রসিদ", "বেতন প্রমাণ", "মজুরি প্রমাণ",
)

# Greetings and question starters accepted for very short messages.
GREETING_PREFIXES: tuple[str, ...] = (
    # English
    "hi", "hello", "hey", "help", "what", "how", "when", "where", "why", "can", "do", "is", "are",
    # Bahasa Malaysia
    "hai", "helo", "tolong", "apa", "bagaimana", "bila", "di mana", "kenapa", "boleh", "adakah",
    # Nepali
    "नमस्ते", "हेलो", "मद्दत", "के", "कसरी", "कहिले", "कहाँ", "किन", "सक्छु", "हो",
    # Hindi
    "नमस्ते", "हैलो", "मदद", "क्या", "कैसे", "कब", "कहाँ", "क्यों", "कर सकता", "है",
    # Bengali
    "হ্যালো", "হেল্প", "কী", "কিভাবে", "কখন", "কোথায়", "কেন", "করতে পারি", "হয়",
)
