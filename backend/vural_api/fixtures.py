"""
Demo data loaded into an empty database on first start.

Fixed ids are used so the admin panel and the tests can refer to the same
rows across restarts.
"""
import logging
from datetime import date, datetime

from sqlalchemy.orm import Session

from vural_api.config import settings
from vural_api.models.blog import BlogPost, Comment
from vural_api.models.category import Category
from vural_api.models.content import JobPosition, MediaItem, Project, SiteContent
from vural_api.models.customer import Customer
from vural_api.models.inbox import JobApplication, QuoteRequest
from vural_api.models.product import Product
from vural_api.models.solar_package import PackageProduct, SolarPackage
from vural_api.services.auth_service import avatar_for, hash_password
from vural_api.utils.stock import stock_status
from vural_api.utils.text import generate_product_seo

log = logging.getLogger(__name__)

UNSPLASH = "https://images.unsplash.com/"

CATEGORIES = [
    {"id": "cat-1", "name": "Güneş Panelleri", "slug": "solar"},
    {"id": "cat-2", "name": "İnvertörler", "slug": "inverter"},
    {"id": "cat-3", "name": "Batarya Sistemleri", "slug": "battery"},
    {"id": "cat-4", "name": "Kablolar", "slug": "cable"},
    {"id": "cat-5", "name": "Elektronik", "slug": "electronics"},
    {"id": "cat-6", "name": "Diğer", "slug": "other"},
]

PRODUCTS = [
    {
        "id": "prd-1",
        "name": "Monokristal Solar Panel 450W",
        "sku": "SP-450-MK",
        "category": "solar",
        "brand": "Vural",
        "price": 4250,
        "stock": 45,
        "image_url": UNSPLASH + "photo-1509391366360-2e959784a276?q=80&w=3264&auto=format&fit=crop",
        "specs": ["20.8% Verim", "Half-Cut"],
        "is_new": True,
    },
    {
        "id": "prd-2",
        "name": "340W Polikristal Panel",
        "sku": "SP-340-PK",
        "category": "solar",
        "price": 3100,
        "stock": 120,
        "image_url": UNSPLASH + "photo-1613665813446-82a78c468a1d?q=80&w=3258&auto=format&fit=crop",
        "specs": ["72 Hücre", "Dayanıklı"],
    },
    {
        "id": "prd-3",
        "name": "Hibrit İnvertör 5kW",
        "sku": "INV-5KW-HB",
        "category": "inverter",
        "price": 12500,
        "stock": 8,
        "image_url": UNSPLASH + "photo-1647427060118-4911c9821b82?q=80&w=2940&auto=format&fit=crop",
        "specs": ["Akıllı MPPT", "48V"],
        "is_premium": True,
    },
    {
        "id": "prd-4",
        "name": "Lityum Batarya 10kWh",
        "sku": "BAT-10-LI",
        "category": "battery",
        "price": 48000,
        "stock": 0,
        "specs": ["LiFePO4", "6000 Döngü"],
    },
]

CUSTOMERS = [
    {
        "id": "usr-1",
        "name": "Ahmet Yılmaz",
        "email": "ahmet@gmail.com",
        "password": "user",
        "phone": "+90 555 123 4567",
        "join_date": date(2023, 10, 1),
    },
]

QUOTES = [
    {
        "id": "qt-101",
        "customer_name": "Kemal Sunal",
        "company_name": "Gülümseten Tarım A.Ş.",
        "email": "kemal@tarim.com",
        "phone": "0532 111 22 33",
        "product_name": "Monokristal Solar Panel 450W",
        "product_sku": "SP-450-MK",
        "message": "Merhaba, arazimizde kullanmak üzere 50 adet panel için fiyat teklifi rica ediyorum. "
        "Kargo dahil fiyat alabilir miyim?",
        "date": date(2024, 5, 20),
        "status": "new",
    },
]

PROJECTS = [
    {
        "id": "prj-1",
        "title": "Akdeniz Meyve Fabrikası",
        "location": "Antalya",
        "coordinates": {"lat": 36.8969, "lng": 30.7133},
        "capacity": "2.5 MW",
        "date": "2023",
        "image_url": UNSPLASH + "photo-1566093097221-ac56396c48e0?q=80&w=2070&auto=format&fit=crop",
        "description": "Endüstriyel çatı üzeri güneş enerjisi santrali projesi ile tesisin enerji "
        "ihtiyacının %85'i karşılanmaktadır.",
        "stats": {"power": "2.5 MW", "panels": "5.500", "co2": "1.800 ton/yıl"},
    },
    {
        "id": "prj-2",
        "title": "Yeşil Vadi Konutları",
        "location": "İzmir",
        "coordinates": {"lat": 38.4237, "lng": 27.1428},
        "capacity": "450 kW",
        "date": "2024",
        "image_url": UNSPLASH + "photo-1625305266405-b772c7221652?q=80&w=2070&auto=format&fit=crop",
        "description": "Site ortak alan aydınlatmaları ve havuz sistemleri için hibrit sistem kurulumu.",
    },
]

BLOG_POSTS = [
    {
        "id": "blog-1",
        "title": "Güneş Enerjisi ile Tasarruf Etmenin 5 Yolu",
        "excerpt": "Evinizde veya iş yerinizde güneş enerjisi kullanarak faturalarınızı nasıl "
        "düşürebileceğinizi keşfedin.",
        "content": "Güneş enerjisi, günümüzde en popüler yenilenebilir enerji kaynaklarından biridir.\n\n"
        "1. Doğru Konumlandırma\n2. Kaliteli İnvertör Seçimi\n3. Batarya Depolama\n"
        "4. Periyodik Bakım\n5. Akıllı Tüketim",
        "author": "Dr. Enerji",
        "date": date(2024, 5, 15),
        "image_url": UNSPLASH + "photo-1508514177221-188b1cf16e9d?q=80&w=2944&auto=format&fit=crop",
        "slug": "gunes-enerjisi-tasarruf-yollari",
        "category": "Solar Enerji",
        "tags": ["Tasarruf", "Teknoloji", "Güneş"],
        "likes": 24,
    },
    {
        "id": "blog-2",
        "title": "İnvertör Seçerken Nelere Dikkat Edilmeli?",
        "excerpt": "Solar sisteminizin kalbi olan invertörleri doğru seçmek, sistem ömrünü ve "
        "verimini doğrudan etkiler.",
        "content": "İnvertörler, güneş panellerinden gelen doğru akımı (DC) alternatif akıma (AC) "
        "çeviren cihazlardır.",
        "author": "Teknik Ekip",
        "date": date(2024, 4, 20),
        "image_url": UNSPLASH + "photo-1647427060118-4911c9821b82?q=80&w=2940&auto=format&fit=crop",
        "slug": "invertor-secimi-rehberi",
        "category": "Teknik Rehber",
        "tags": ["İnvertör", "Mühendislik"],
        "likes": 15,
    },
]

COMMENTS = [
    {
        "id": "c1",
        "post_id": "blog-1",
        "user_id": "usr-1",
        "user_name": "Ahmet Yılmaz",
        "user_avatar": avatar_for("Ahmet"),
        "content": "Çok faydalı bir yazı olmuş, teşekkürler. Panellerin ömrü hakkında da bilgi verir misiniz?",
        "date": datetime(2024, 5, 16, 10, 0),
    },
    {
        "id": "c2",
        "post_id": "blog-1",
        "user_id": "usr-99",
        "user_name": "Mehmet Demir",
        "user_avatar": avatar_for("Mehmet"),
        "content": "Güneş enerjisi gerçekten geleceğimiz.",
        "date": datetime(2024, 5, 17, 9, 30),
    },
]

JOB_APPLICATIONS = [
    {
        "id": "job-1",
        "full_name": "Caner Erkin",
        "email": "caner@test.com",
        "phone": "0555 999 88 77",
        "position": "Saha Mühendisi",
        "cover_letter": "Yenilenebilir enerji sektöründe 5 yıllık tecrübem var. Projelerinizde yer almak istiyorum.",
        "linkedin_url": "linkedin.com/in/caner",
        "date": date(2024, 5, 21),
    },
]

JOB_POSITIONS = [
    {
        "id": "pos-1",
        "title": "Saha Mühendisi",
        "location": "İstanbul",
        "type": "Full-time",
        "description": "GES kurulum sahalarında proje takibi ve devreye alma.",
        "requirements": ["Elektrik-Elektronik Mühendisliği", "B sınıfı ehliyet", "Seyahat engeli olmamak"],
    },
    {
        "id": "pos-2",
        "title": "Satış Temsilcisi",
        "location": "Antalya",
        "type": "Hybrid",
        "description": "Bölge bayileri ve kurumsal müşterilerle satış süreçlerinin yürütülmesi.",
        "requirements": ["En az 2 yıl satış deneyimi", "İyi derecede İngilizce"],
    },
]

MEDIA = [
    {"id": "media-1", "url": UNSPLASH + "photo-1509391366360-2e959784a276", "name": "Çatı GES", "type": "image"},
    {"id": "media-2", "url": UNSPLASH + "photo-1497435334941-8c899ee9e8e9", "name": "Panel Tarlası", "type": "image"},
    {"id": "media-3", "url": UNSPLASH + "photo-1466611653911-95081537e5b7", "name": "Rüzgar ve Güneş", "type": "image"},
]

SITE_CONTENT = {
    "heroTitle": "Temiz Enerji, Parlak Yarınlar",
    "heroSubtitle": "Vural Enerji ile kendi elektriğinizi üretin, doğayı koruyun ve enerji maliyetlerinizi sıfırlayın.",
    "heroButtonText": "Projelerimizi İncele",
    "heroImages": [m["url"] for m in MEDIA],
    "aboutText": "Vural Enerji, 2010 yılında yenilenebilir enerji sektöründe faaliyet göstermek üzere kurulmuştur.",
    "visionText": "Türkiye'nin ve bölgenin lider yenilenebilir enerji çözüm ortağı olmak.",
    "missionText": "Müşterilerimizin enerji bağımsızlığını kazanmalarını sağlamak.",
    "newsTitle": "Enerji Dünyasından Haberler",
    "news": [
        {
            "id": "n1",
            "title": "2024 Güneş Enerjisi Teşvikleri Açıklandı",
            "summary": "Tarımsal sulama ve çatı GES projelerinde %50 hibe desteği başladı.",
            "date": "10 Mayıs 2024",
            "category": "solar",
            "sourceName": "Enerji Bakanlığı",
            "sourceUrl": "https://enerji.gov.tr",
        },
        {
            "id": "n2",
            "title": "Rüzgar Enerjisinde Yeni Dönem",
            "summary": "Yerli türbin üretimi kapasitesi artırılıyor.",
            "date": "22 Nisan 2024",
            "category": "wind",
            "sourceName": "EPDK",
            "sourceUrl": "https://epdk.gov.tr",
        },
    ],
    "contactAddress": "Teknoloji Cad. Yeşil Plaza No:12/4, Maslak, İstanbul",
    "contactPhone": "+90 (212) 555 0123",
    "contactEmail": "info@vuralenerji.com",
    "features": [
        {"id": "f1", "icon": "eco", "title": "Çevre Dostu Teknoloji", "text": "Geri dönüştürülebilir sistemler.", "color": "green"},
        {"id": "f2", "icon": "engineering", "title": "Uzman Mühendislik", "text": "Her proje için özel simülasyon.", "color": "orange"},
        {"id": "f3", "icon": "support_agent", "title": "Kesintisiz Destek", "text": "7/24 teknik destek.", "color": "blue"},
    ],
    "ctaTitle": "Teknoloji ile Doğayı Buluşturuyoruz",
    "ctaText": "Üretiminizi mobil uygulamamızdan anlık takip edin.",
    "ctaImageUrl": UNSPLASH + "photo-1559302504-64aae6ca6b6f?q=80&w=2574&auto=format&fit=crop",
    "ctaButtonText": "Teknolojimizi Keşfedin",
    "partners": [
        {"id": "p1", "name": "Partner 1", "logoUrl": "/partners/partner-1.png", "siteUrl": "#"},
        {"id": "p2", "name": "Partner 2", "logoUrl": "/partners/partner-2.png", "siteUrl": "#"},
    ],
    "socialLinks": [
        {"platform": "facebook", "url": "#", "icon": "public"},
        {"platform": "instagram", "url": "#", "icon": "photo_camera"},
        {"platform": "linkedin", "url": "#", "icon": "share"},
    ],
}

SAMPLE_PACKAGE = {
    "id": "pkg-sample-1000",
    "name": "Ev Tipi 1000 TL Fatura Paketi",
    "description": "Aylık 800-1200 TL elektrik faturası olan evler için ideal paket.",
    "min_bill": 800,
    "max_bill": 1200,
    "system_power": "5 kW",
    "total_price": 85000,
    "installation_cost": 10000,
    "image_url": UNSPLASH + "photo-1509391366360-2e959784a276?auto=format&fit=crop&w=1920&q=80",
    "savings": "~12.000 TL/yıl",
    "payback_period": "~8 yıl",
    "status": "active",
}
SAMPLE_PACKAGE_LINES = [("prd-1", 10), ("prd-3", 1), ("prd-4", 1)]


def _product(fields: dict) -> Product:
    p = Product(status="active", images=[], **fields)
    p.stock_status = stock_status(p.stock)
    p.seo = generate_product_seo(p.name, p.description, p.category, p.brand, [p.image_url])
    p.slug = p.seo["slug"]
    return p


def seed_fixtures(db: Session) -> dict:
    """Insert the demo rows. The caller commits."""
    db.add_all(Category(**c) for c in CATEGORIES)
    products = {p["id"]: _product(p) for p in PRODUCTS}
    db.add_all(products.values())

    for c in CUSTOMERS:
        fields = dict(c)
        password = fields.pop("password")
        db.add(Customer(password_hash=hash_password(password), avatar=avatar_for(fields["name"]), **fields))

    db.add_all(QuoteRequest(**q) for q in QUOTES)
    db.add_all(Project(**p) for p in PROJECTS)

    posts = [BlogPost(**p) for p in BLOG_POSTS]
    db.add_all(posts)
    db.add_all(Comment(**c) for c in COMMENTS)

    db.add_all(JobApplication(**a) for a in JOB_APPLICATIONS)
    db.add_all(JobPosition(is_active=True, **p) for p in JOB_POSITIONS)
    db.add_all(MediaItem(**m) for m in MEDIA)
    db.add(SiteContent(id=1, data=SITE_CONTENT))

    pkg = SolarPackage(**SAMPLE_PACKAGE)
    for i, (product_id, qty) in enumerate(SAMPLE_PACKAGE_LINES):
        product = products[product_id]
        pkg.products.append(
            PackageProduct(
                id=f"pp-sample-{i}",
                product_id=product.id,
                product_name=product.name,
                quantity=qty,
                unit_price=product.price,
                image_url=product.image_url,
            )
        )
    pkg.panel_count = sum(qty for pid, qty in SAMPLE_PACKAGE_LINES if products[pid].category == "solar")
    db.add(pkg)
    db.flush()

    return {
        "categories": len(CATEGORIES),
        "products": len(PRODUCTS),
        "customers": len(CUSTOMERS),
        "blog_posts": len(BLOG_POSTS),
        "packages": 1,
    }


def ensure_admin(db: Session) -> Customer:
    """Create the configured admin account if no customer has that email yet."""
    email = settings.ADMIN_EMAIL.strip().lower()
    admin = db.query(Customer).filter(Customer.email == email).first()
    if admin:
        return admin
    admin = Customer(
        id="usr-admin",
        name=settings.ADMIN_NAME,
        email=email,
        password_hash=hash_password(settings.ADMIN_PASSWORD),
        role="admin",
        status="active",
        phone="",
        avatar=avatar_for(settings.ADMIN_NAME),
    )
    db.add(admin)
    db.flush()
    log.info("admin account created for %s", email)
    return admin
