"""Bundled storefront dataset.

Served by the storefront's static gateway when the backend is unreachable
(or when static data is requested explicitly) and loaded into the backend
by ``manage.py seed``. Records use the backend's wire shape: ``_id`` plus
bilingual ``*_en`` / ``*_ar`` fields.
"""

_PEXELS = "https://images.pexels.com/photos/{id}/pexels-photo-{id}.jpeg?auto=compress&cs=tinysrgb&w={w}&h={h}&fit=crop"


def _image(photo_id: int, width: int = 600, height: int = 400) -> str:
    return _PEXELS.format(id=photo_id, w=width, h=height)


IMPACT_METRICS = {
    "textiles_diverted_kg": 2847,
    "women_trained": 35,
    "income_disbursed_egp": 125000,
    "current_campaign_goal_egp": 75000,
    "current_campaign_raised_egp": 32000,
}

ARTISANS = [
    {
        "_id": "1",
        "name_en": "Fatma Hassan",
        "name_ar": "فاطمة حسن",
        "bio_en": "A skilled artisan from rural Giza with 15 years of experience in textile crafts.",
        "bio_ar": "حرفية ماهرة من ريف الجيزة لديها 15 عامًا من الخبرة في الحرف النسيجية.",
        "image_url": _image(8070577, 400, 400),
    },
    {
        "_id": "2",
        "name_en": "Aisha Mohamed",
        "name_ar": "عائشة محمد",
        "bio_en": "A young entrepreneur from Aswan who creates beautiful home décor items.",
        "bio_ar": "رائدة أعمال شابة من أسوان تصنع قطع ديكور منزلي جميلة.",
        "image_url": _image(8964999, 400, 400),
    },
    {
        "_id": "3",
        "name_en": "Nadia Ahmed",
        "name_ar": "نادية أحمد",
        "bio_en": "A master craftswoman from Luxor known for her intricate beadwork.",
        "bio_ar": "حرفية ماهرة من الأقصر معروفة بأعمالها المعقدة في الخرز.",
        "image_url": _image(8964906, 400, 400),
    },
]

PRODUCTS = [
    {
        "_id": "1",
        "name_en": "Handwoven Tote Bag",
        "name_ar": "حقيبة يد منسوجة يدوياً",
        "description_en": "Beautiful handwoven tote bag made from upcycled cotton fabrics.",
        "description_ar": "حقيبة يد جميلة منسوجة يدوياً من أقمشة القطن المعاد تدويرها.",
        "price": 350.0,
        "category": "Bags",
        "images": [_image(7991579), _image(5632382)],
        "artisan_id": "1",
        "materials_en": "100% upcycled cotton, natural dyes",
        "materials_ar": "100% قطن معاد التدوير، أصباغ طبيعية",
        "care_en": "Hand wash in cold water, air dry",
        "care_ar": "اغسل باليد بالماء البارد، جفف بالهواء",
        "stock": 15,
        "featured": True,
    },
    {
        "_id": "2",
        "name_en": "Embroidered Table Runner",
        "name_ar": "مفرش طاولة مطرز",
        "description_en": "Elegant table runner featuring intricate hand embroidery.",
        "description_ar": "مفرش طاولة أنيق يتميز بتطريز يدوي معقد.",
        "price": 280.0,
        "category": "Home Décor",
        "images": [_image(6249509)],
        "artisan_id": "2",
        "materials_en": "Upcycled linen-cotton blend, silk embroidery thread",
        "materials_ar": "خليط الكتان والقطن المعاد تدويره، خيط حرير للتطريز",
        "care_en": "Gentle machine wash, low heat dry",
        "care_ar": "غسيل آلة لطيف، تجفيف على حرارة منخفضة",
        "stock": 8,
        "featured": True,
    },
    {
        "_id": "3",
        "name_en": "Woven Wall Hanging",
        "name_ar": "معلقة جدارية منسوجة",
        "description_en": "Contemporary wall art piece created using traditional weaving techniques.",
        "description_ar": "قطعة فنية جدارية معاصرة مصنوعة باستخدام تقنيات النسيج التقليدية.",
        "price": 450.0,
        "category": "Art",
        "images": [_image(6984979)],
        "artisan_id": "3",
        "materials_en": "Recycled wool, organic cotton, natural fiber cord",
        "materials_ar": "صوف معاد التدوير، قطن عضوي، حبل ألياف طبيعية",
        "care_en": "Dust regularly, spot clean only",
        "care_ar": "نظف من الغبار بانتظام، تنظيف موضعي فقط",
        "stock": 5,
        "featured": True,
    },
    {
        "_id": "4",
        "name_en": "Cushion Cover Set",
        "name_ar": "طقم أغطية وسائد",
        "description_en": "Set of 2 decorative cushion covers with traditional Egyptian patterns.",
        "description_ar": "طقم من غطائين للوسائد الزخرفية بأنماط مصرية تقليدية.",
        "price": 220.0,
        "category": "Home Décor",
        "images": [_image(6207706)],
        "artisan_id": "1",
        "materials_en": "Upcycled cotton canvas, polyester fill",
        "materials_ar": "قماش قطني معاد التدوير، حشو بوليستر",
        "care_en": "Machine wash cold, tumble dry low",
        "care_ar": "غسيل آلة بارد، تجفيف منخفض",
        "stock": 20,
        "featured": False,
    },
    {
        "_id": "5",
        "name_en": "Macrame Plant Hanger",
        "name_ar": "معلق نباتات مكرمية",
        "description_en": "Stylish macrame plant hanger made from natural cotton cord.",
        "description_ar": "معلق نباتات مكرمية أنيق مصنوع من حبل القطن الطبيعي.",
        "price": 180.0,
        "category": "Home Décor",
        "images": [_image(6207695)],
        "artisan_id": "2",
        "materials_en": "100% natural cotton cord, wooden ring",
        "materials_ar": "100% حبل قطن طبيعي، حلقة خشبية",
        "care_en": "Spot clean with damp cloth, air dry",
        "care_ar": "تنظيف موضعي بقطعة قماش مبللة، تجفيف بالهواء",
        "stock": 12,
        "featured": False,
    },
    {
        "_id": "6",
        "name_en": "Handmade Jewelry Pouch",
        "name_ar": "حقيبة مجوهرات يدوية",
        "description_en": "Compact jewelry pouch with multiple compartments and delicate embroidery.",
        "description_ar": "حقيبة مجوهرات صغيرة بعدة أقسام وتطريز رقيق.",
        "price": 150.0,
        "category": "Accessories",
        "images": [_image(5632387)],
        "artisan_id": "3",
        "materials_en": "Upcycled silk, cotton lining, brass hardware",
        "materials_ar": "حرير معاد التدوير، بطانة قطنية، قطع معدنية نحاسية",
        "care_en": "Wipe clean with soft cloth",
        "care_ar": "امسح بقطعة قماش ناعمة",
        "stock": 25,
        "featured": True,
    },
]

BLOG_POSTS = [
    {
        "_id": "1",
        "title_en": "Empowering Women Through Sustainable Crafts",
        "title_ar": "تمكين المرأة من خلال الحرف المستدامة",
        "content_en": "Our mission goes beyond creating beautiful products...",
        "content_ar": "مهمتنا تتجاوز صنع المنتجات الجميلة...",
        "author": "Sarah Ahmed",
        "date": "2024-01-15T00:00:00+00:00",
        "image_url": _image(8964906),
    },
    {
        "_id": "2",
        "title_en": "The Art of Upcycling",
        "title_ar": "فن إعادة التدوير",
        "content_en": "In a world drowning in textile waste, we have found beauty...",
        "content_ar": "في عالم يغرق في نفايات المنسوجات، وجدنا الجمال...",
        "author": "Mohamed Hassan",
        "date": "2024-01-10T00:00:00+00:00",
        "image_url": _image(7991579),
    },
    {
        "_id": "3",
        "title_en": "Building Sustainable Communities Through Craft",
        "title_ar": "بناء مجتمعات مستدامة من خلال الحرف",
        "content_en": "Sustainability is not just about environmental impact...",
        "content_ar": "الاستدامة ليست فقط عن التأثير البيئي...",
        "author": "Layla Mahmoud",
        "date": "2024-01-05T00:00:00+00:00",
        "image_url": _image(6984979),
    },
]

COLLECTION_POINTS = [
    {
        "_id": "1",
        "name_en": "Downtown Cairo Collection Center",
        "name_ar": "مركز تجميع وسط القاهرة",
        "address_en": "15 Tahrir Square, Downtown, Cairo",
        "address_ar": "15 ميدان التحرير، وسط البلد، القاهرة",
        "latitude": 30.0444,
        "longitude": 31.2357,
        "hours_en": "Sunday - Thursday: 9 AM - 6 PM",
        "hours_ar": "الأحد - الخميس: 9 صباحاً - 6 مساءً",
        "contact_phone": "+20 2 2345 6789",
    },
    {
        "_id": "2",
        "name_en": "Zamalek Community Hub",
        "name_ar": "مركز مجتمع الزمالك",
        "address_en": "8 Kasr El Nil Street, Zamalek, Cairo",
        "address_ar": "8 شارع قصر النيل، الزمالك، القاهرة",
        "latitude": 30.0618,
        "longitude": 31.2194,
        "hours_en": "Daily: 10 AM - 8 PM",
        "hours_ar": "يومياً: 10 صباحاً - 8 مساءً",
        "contact_phone": "+20 2 2876 5432",
    },
    {
        "_id": "3",
        "name_en": "New Cairo Branch",
        "name_ar": "فرع القاهرة الجديدة",
        "address_en": "Cairo Festival City Mall, Level 2, New Cairo",
        "address_ar": "مول القاهرة فيستيفال سيتي، المستوى الثاني، القاهرة الجديدة",
        "latitude": 30.0131,
        "longitude": 31.4056,
        "hours_en": "Daily: 10 AM - 10 PM",
        "hours_ar": "يومياً: 10 صباحاً - 10 مساءً",
        "contact_phone": "+20 2 2654 3210",
    },
    {
        "_id": "4",
        "name_en": "Alexandria Coastal Center",
        "name_ar": "مركز الإسكندرية الساحلي",
        "address_en": "45 Corniche Road, Alexandria",
        "address_ar": "45 طريق الكورنيش، الإسكندرية",
        "latitude": 31.2001,
        "longitude": 29.9187,
        "hours_en": "Sunday - Thursday: 9 AM - 5 PM",
        "hours_ar": "الأحد - الخميس: 9 صباحاً - 5 مساءً",
        "contact_phone": "+20 3 3456 7890",
    },
    {
        "_id": "5",
        "name_en": "Giza Cultural Center",
        "name_ar": "المركز الثقافي بالجيزة",
        "address_en": "12 Pyramids Road, Giza",
        "address_ar": "12 طريق الأهرام، الجيزة",
        "latitude": 30.0131,
        "longitude": 31.2089,
        "hours_en": "Saturday - Wednesday: 8 AM - 4 PM",
        "hours_ar": "السبت - الأربعاء: 8 صباحاً - 4 مساءً",
        "contact_phone": "+20 2 3567 8901",
    },
]
