from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Category:
    id: str
    name_en: str
    name_he: str


@dataclass(frozen=True)
class AmenityDefinition:
    id: str
    name_en: str
    name_he: str
    icon: str
    category: str


CATEGORIES: tuple[Category, ...] = (
    Category("pools", "Pools & Water", "בריכות ומים"),
    Category("fitness", "Fitness & Gym", "כושר וחדר כושר"),
    Category("sports", "Sports & Courts", "ספורט ומגרשים"),
    Category("wellness", "Spa & Wellness", "ספא ווולנס"),
    Category("kids", "Kids & Family", "ילדים ומשפחה"),
    Category("entertainment", "Entertainment & Leisure", "בידור ופנאי"),
    Category("work", "Work & Business", "עבודה ועסקים"),
    Category("dining", "Dining & BBQ", "אוכל וברביקיו"),
    Category("beach", "Beach & Waterfront", "חוף וים"),
    Category("marina", "Marina & Yachts", "מרינה ויאכטות"),
    Category("outdoors", "Gardens & Outdoors", "גינות וחוץ"),
    Category("pets", "Pets", "חיות מחמד"),
    Category("services", "Services & Concierge", "שירותים וקונסיירז׳"),
    Category("security", "Security & Access", "ביטחון וגישה"),
    Category("parking", "Parking & Transport", "חניה ותחבורה"),
    Category("tech", "Technology & Smart Home", "טכנולוגיה ובית חכם"),
    Category("retail", "Retail & Community", "קניות ושירותים קהילתיים"),
    Category("religious", "Religious & Cultural", "דת ותרבות"),
    Category("sustainability", "Sustainability & Green", "קיימות וירוק"),
    Category("unit", "Unit Features", "מאפייני יחידה"),
    Category("views", "Views & Status", "נופים וסטטוס"),
)

AMENITIES: tuple[AmenityDefinition, ...] = (
    # Pools & Water
    AmenityDefinition("swimming-pool", "Swimming Pool", "בריכת שחייה", "waves", "pools"),
    AmenityDefinition("infinity-pool", "Infinity Pool", "בריכת אינפיניטי", "waves", "pools"),
    AmenityDefinition("rooftop-infinity-pool", "Rooftop Infinity Pool", "בריכת אינפיניטי על הגג", "waves", "pools"),
    AmenityDefinition("indoor-pool", "Indoor Swimming Pool", "בריכה מקורה", "waves", "pools"),
    AmenityDefinition("outdoor-pool", "Outdoor Swimming Pool", "בריכת שחייה חיצונית", "waves", "pools"),
    AmenityDefinition("lap-pool", "Lap Pool / 25m Pool", "בריכת הקפות (25 מ׳)", "waves", "pools"),
    AmenityDefinition("temperature-pool", "Temperature-Controlled Pool", "בריכה מחוממת / מקוררת", "thermometer", "pools"),
    AmenityDefinition("children-pool", "Children's Pool", "בריכת ילדים", "droplets", "pools"),
    AmenityDefinition("splash-pad", "Splash Pad", "משטח התזה לילדים", "droplets", "pools"),
    AmenityDefinition("plunge-pool", "Plunge Pool", "בריכת צלילה", "droplet", "pools"),
    AmenityDefinition("cold-plunge-pool", "Cold Plunge Pool", "בריכת קור", "snowflake", "pools"),
    AmenityDefinition("private-pool", "Private Pool (In-Unit)", "בריכה פרטית ביחידה", "waves", "pools"),
    AmenityDefinition("hydrotherapy-pool", "Hydrotherapy Pool", "בריכת הידרותרפיה", "heart", "pools"),
    AmenityDefinition("thalassotherapy-pool", "Thalassotherapy Pool", "בריכת תלסותרפיה", "heart", "pools"),
    AmenityDefinition("aqua-gym-pool", "Aqua Gym Pool", "בריכת אקווה ג׳ים", "activity", "pools"),
    AmenityDefinition("jacuzzi", "Jacuzzi / Hot Tub", "ג׳קוזי / אמבט חם", "flame", "pools"),
    AmenityDefinition("private-jacuzzi", "Private Jacuzzi", "ג׳קוזי פרטי", "flame", "pools"),
    AmenityDefinition("crystal-lagoon", "Crystal Lagoon", "קריסטל לגון", "sparkles", "pools"),
    AmenityDefinition("swimmable-lagoon", "Swimmable Lagoon", "לגונה שחייתית", "waves", "pools"),
    AmenityDefinition("lazy-river", "Lazy River", "נהר עצלנים", "waves", "pools"),
    AmenityDefinition("wave-pool", "Wave Pool / Surf Pool", "בריכת גלים / סרף", "waves", "pools"),
    AmenityDefinition("water-slides", "Water Slides", "מגלשות מים", "waves", "pools"),
    AmenityDefinition("swim-up-bar", "Swim-Up Bar / Pool Bar", "בר בבריכה", "wine", "pools"),
    AmenityDefinition("sun-deck-cabanas", "Sun Deck & Cabanas", "דק שמש וקבאנות", "sun", "pools"),
    AmenityDefinition("water-features", "Water Features / Fountains", "מזרקות דקורטיביות", "droplets", "pools"),
    AmenityDefinition("waterfalls", "Cascading Waterfalls", "מפלים", "waves", "pools"),
    AmenityDefinition("flotation-pool", "Flotation / Sensory Pool", "בריכת צפה חושית", "sparkles", "pools"),
    AmenityDefinition("boating-lake", "Boating / Paddle Board Lake", "אגם שיט / סאפ", "waves", "pools"),

    # Fitness & Gym
    AmenityDefinition("gym", "State-of-the-Art Gym", "חדר כושר מתקדם", "dumbbell", "fitness"),
    AmenityDefinition("private-gym", "Private Gym (In-Unit)", "חדר כושר פרטי ביחידה", "dumbbell", "fitness"),
    AmenityDefinition("outdoor-gym", "Outdoor Gym / Fitness Stations", "חדר כושר חיצוני", "dumbbell", "fitness"),
    AmenityDefinition("underwater-gym", "Aquatic / Underwater Gym", "חדר כושר מתחת למים", "waves", "fitness"),
    AmenityDefinition("yoga-studio", "Yoga Studio", "סטודיו יוגה", "activity", "fitness"),
    AmenityDefinition("yoga-deck", "Yoga Deck / Pavilion", "דק יוגה חיצוני", "activity", "fitness"),
    AmenityDefinition("pilates-studio", "Pilates Studio", "סטודיו פילאטיס", "activity", "fitness"),
    AmenityDefinition("spin-studio", "Cycling / Spin Studio", "סטודיו ספינינג", "bike", "fitness"),
    AmenityDefinition("boxing-studio", "Boxing / Kickboxing Studio", "סטודיו אגרוף / קיקבוקסינג", "target", "fitness"),
    AmenityDefinition("crossfit-area", "CrossFit / Functional Training", "אזור קרוספיט / פונקציונלי", "dumbbell", "fitness"),
    AmenityDefinition("dance-studio", "Dance Studio", "סטודיו ריקוד", "music", "fitness"),
    AmenityDefinition("aerobics-zone", "Aerobics Zone", "אזור אירובי", "activity", "fitness"),
    AmenityDefinition("health-club", "Health Club", "מועדון בריאות", "heart", "fitness"),
    AmenityDefinition("personal-trainers", "Personal Trainers (On-Staff)", "מאמנים אישיים (צוות)", "users", "fitness"),

    # Sports & Courts
    AmenityDefinition("tennis-court", "Tennis Court", "מגרש טניס", "circle", "sports"),
    AmenityDefinition("tennis-academy", "Tennis Academy", "אקדמיית טניס", "trophy", "sports"),
    AmenityDefinition("padel-court", "Padel Court", "מגרש פאדל", "circle", "sports"),
    AmenityDefinition("basketball-court", "Basketball Court", "מגרש כדורסל", "circle", "sports"),
    AmenityDefinition("indoor-basketball", "Indoor Basketball Court", "מגרש כדורסל מקורה", "circle", "sports"),
    AmenityDefinition("football-pitch", "Football Pitch", "מגרש כדורגל", "circle", "sports"),
    AmenityDefinition("volleyball-court", "Volleyball Court", "מגרש כדורעף", "circle", "sports"),
    AmenityDefinition("beach-volleyball", "Beach Volleyball Court", "מגרש כדורעף חופים", "circle", "sports"),
    AmenityDefinition("badminton-court", "Badminton Court", "מגרש בדמינטון", "circle", "sports"),
    AmenityDefinition("squash-court", "Squash Court", "מגרש סקווש", "square", "sports"),
    AmenityDefinition("cricket-pitch", "Cricket Pitch / Nets", "מגרש קריקט", "circle", "sports"),
    AmenityDefinition("bocce-court", "Bocce Ball Court", "מגרש בוצ׳ה", "circle", "sports"),
    AmenityDefinition("table-tennis", "Table Tennis / Ping Pong", "טניס שולחן / פינג פונג", "circle", "sports"),
    AmenityDefinition("billiards-room", "Billiards / Snooker Room", "חדר ביליארד / סנוקר", "target", "sports"),
    AmenityDefinition("bowling-alley", "Bowling Alley", "מסלול באולינג", "target", "sports"),
    AmenityDefinition("multipurpose-court", "Multipurpose Sports Court", "מגרש ספורט רב תכליתי", "activity", "sports"),
    AmenityDefinition("climbing-wall", "Rock Climbing Wall", "קיר טיפוס", "mountain", "sports"),
    AmenityDefinition("trampoline-area", "Trampoline Area", "אזור טרמפולינה", "activity", "sports"),
    AmenityDefinition("skate-park", "Skate Park", "סקייט פארק", "activity", "sports"),
    AmenityDefinition("mini-golf", "Mini Golf", "מיני גולף", "flag", "sports"),
    AmenityDefinition("golf-18", "18-Hole Golf Course", "מגרש גולף 18 גומות", "flag", "sports"),
    AmenityDefinition("golf-9", "9-Hole / Par 3 Golf Course", "מגרש גולף 9 גומות", "flag", "sports"),
    AmenityDefinition("driving-range", "Driving Range", "טווח נהיגה", "flag", "sports"),
    AmenityDefinition("putting-green", "Putting Green", "גרין אימון", "flag", "sports"),
    AmenityDefinition("golf-clubhouse", "Golf Clubhouse", "מועדון גולף", "flag", "sports"),
    AmenityDefinition("equestrian-centre", "Equestrian Centre / Stables", "מרכז רכיבה / אורוות", "activity", "sports"),
    AmenityDefinition("polo-club", "Polo Club", "מועדון פולו", "trophy", "sports"),
    AmenityDefinition("paintball-park", "Paintball Park", "פארק פיינטבול", "target", "sports"),
    AmenityDefinition("go-karting", "Go-Karting Track", "מסלול גו-קארט", "car", "sports"),
    AmenityDefinition("water-sports", "Water Sports (Surf/Kayak)", "ספורט מים (סרף/קיאק)", "waves", "sports"),
    AmenityDefinition("chess-area", "Chess Area", "אזור שחמט", "target", "sports"),

    # Spa & Wellness
    AmenityDefinition("spa-wellness-centre", "Full-Service Spa & Wellness Centre", "ספא ומרכז וולנס", "sparkles", "wellness"),
    AmenityDefinition("shared-spa", "Shared Spa", "ספא משותף", "heart", "wellness"),
    AmenityDefinition("private-spa", "Private Spa (In-Unit)", "ספא פרטי ביחידה", "sparkles", "wellness"),
    AmenityDefinition("treatment-rooms", "Treatment & Massage Rooms", "חדרי טיפולים ועיסויים", "heart", "wellness"),
    AmenityDefinition("couples-spa", "Couple's Spa Suite", "סוויטת ספא לזוגות", "heart", "wellness"),
    AmenityDefinition("sauna", "Sauna / Finnish Sauna", "סאונה יבשה / פינית", "flame", "wellness"),
    AmenityDefinition("infrared-sauna", "Infrared Sauna", "סאונה אינפרא אדום", "flame", "wellness"),
    AmenityDefinition("steam-room", "Steam Room / Steam Bath", "חדר אדים / סטים", "wind", "wellness"),
    AmenityDefinition("steam-shower", "Steam Shower", "מקלחת אדים", "wind", "wellness"),
    AmenityDefinition("hammam", "Turkish Hammam", "חמאם טורקי", "sparkles", "wellness"),
    AmenityDefinition("ice-bath", "Ice Bath / Cold Plunge", "אמבט קרח", "snowflake", "wellness"),
    AmenityDefinition("snow-room", "Snow Room", "חדר שלג", "snowflake", "wellness"),
    AmenityDefinition("cryotherapy", "Cryotherapy Chamber", "קריותרפיה", "snowflake", "wellness"),
    AmenityDefinition("hyperbaric-chamber", "Hyperbaric Oxygen Chamber", "תא לחץ היפרברי", "wind", "wellness"),
    AmenityDefinition("salt-room", "Salt Room (Halotherapy)", "חדר מלח (הלותרפיה)", "sparkles", "wellness"),
    AmenityDefinition("aromatherapy-room", "Aromatherapy Room", "חדר ארומתרפיה", "flower2", "wellness"),
    AmenityDefinition("sound-healing", "Sound Healing Room", "חדר ריפוי בצליל", "music", "wellness"),
    AmenityDefinition("hydrotherapy-path", "Hydrotherapy Path", "נתיב הידרותרפיה", "heart", "wellness"),
    AmenityDefinition("flotation-tank", "Flotation / Sensory Tank", "אזור צפה / חושי", "waves", "wellness"),
    AmenityDefinition("iv-therapy", "IV Therapy Room", "חדר IV תרפיה", "heart", "wellness"),
    AmenityDefinition("sports-recovery", "Sports Recovery Room", "חדר התאוששות ספורטיבי", "activity", "wellness"),
    AmenityDefinition("wellness-lounge", "Wellness / Relaxation Lounge", "טרקלין וולנס / הרפיה", "sparkles", "wellness"),
    AmenityDefinition("wellness-concierge", "Wellness Concierge", "קונסיירז׳ וולנס", "star", "wellness"),
    AmenityDefinition("nutrition-consultation", "Nutrition Consultation", "ייעוץ תזונתי", "heart", "wellness"),
    AmenityDefinition("beauty-salon", "Beauty Salon / Hair Salon", "מספרה / סלון יופי", "sparkles", "wellness"),
    AmenityDefinition("health-bar", "Health Bar / Juice Bar", "בר בריאות / מיצים", "coffee", "wellness"),
    AmenityDefinition("doctor-on-call", "Doctor on Call", "רופא תורן", "heart", "wellness"),
    AmenityDefinition("first-aid-centre", "First Aid Medical Centre", "מרכז עזרה ראשונה", "heart", "wellness"),
    AmenityDefinition("longevity-programme", "Longevity & Wellness Programme", "תוכנית אריכות ימים", "sparkles", "wellness"),

    # Kids & Family
    AmenityDefinition("outdoor-playground", "Outdoor Playground", "גן משחקים חיצוני", "baby", "kids"),
    AmenityDefinition("indoor-playroom", "Indoor Play Area / Playroom", "חדר משחקים פנימי", "baby", "kids"),
    AmenityDefinition("kids-wet-play", "Children's Wet Play Area", "אזור משחקי מים לילדים", "droplets", "kids"),
    AmenityDefinition("kids-dry-play", "Children's Dry Play Area", "אזור משחק יבש לילדים", "baby", "kids"),
    AmenityDefinition("kids-club", "Kids' Club / Activity Centre", "מועדון ילדים", "star", "kids"),
    AmenityDefinition("nursery", "Nursery / Day Care", "משפחתון / גן ילדים", "baby", "kids"),
    AmenityDefinition("teen-lounge", "Teen Lounge / Youth Zone", "טרקלין נוער", "users", "kids"),
    AmenityDefinition("co-study-area", "Co-Study Area (Teens)", "חדר לימוד שיתופי (נוער)", "bookopen", "kids"),
    AmenityDefinition("stem-room", "STEM / Educational Room", "חדר פעילות STEM / חינוכי", "graduationcap", "kids"),
    AmenityDefinition("kids-trampoline", "Kids Trampoline Park", "פארק טרמפולינות (ילדים)", "activity", "kids"),
    AmenityDefinition("mini-water-park", "Mini Water Park (Kids)", "מיני פארק מים / מגלשות", "waves", "kids"),
    AmenityDefinition("petting-farm", "Petting Farm", "פינת חי / חווה", "heart", "kids"),
    AmenityDefinition("butterfly-garden", "Butterfly Garden", "גן פרפרים", "flower2", "kids"),
    AmenityDefinition("community-schools", "Schools (Within Community)", "בתי ספר בקהילה", "graduationcap", "kids"),
    AmenityDefinition("creative-workshops", "Creative Workshops (Art/Music)", "סדנאות יצירה (אמנות/מוזיקה)", "palette", "kids"),

    # Entertainment & Leisure
    AmenityDefinition("private-cinema", "Private Cinema / Screening Room", "קולנוע פרטי / חדר הקרנה", "film", "entertainment"),
    AmenityDefinition("indoor-cinema", "Indoor Cinema / Movie Theatre", "קולנוע מקורה (40 מושבים)", "film", "entertainment"),
    AmenityDefinition("outdoor-cinema", "Outdoor Cinema", "קולנוע חיצוני", "film", "entertainment"),
    AmenityDefinition("floating-cinema", "Floating Cinema", "קולנוע צף", "film", "entertainment"),
    AmenityDefinition("home-cinema", "Private Home Cinema (In-Unit)", "קולנוע ביתי פרטי (ביחידה)", "tv", "entertainment"),
    AmenityDefinition("residents-lounge", "Residents' Lounge", "טרקלין דיירים", "users", "entertainment"),
    AmenityDefinition("rooftop-lounge", "Rooftop Lounge / Terrace", "טרקלין על הגג", "sun", "entertainment"),
    AmenityDefinition("sky-lounge", "Sky Lounge", "סקיי לאונג׳", "star", "entertainment"),
    AmenityDefinition("observation-deck", "Observatory / Observation Deck", "תצפית פנורמית 360°", "eye", "entertainment"),
    AmenityDefinition("cigar-lounge", "Cigar Lounge", "טרקלין סיגרים", "wind", "entertainment"),
    AmenityDefinition("wine-cellar", "Wine Cellar / Wine Room", "חדר יינות / מרתף", "wine", "entertainment"),
    AmenityDefinition("game-room", "Game Room / Entertainment Room", "חדר משחקים / בילוי", "gamepad2", "entertainment"),
    AmenityDefinition("gaming-lounge", "Gaming / E-Sports Lounge", "לאונג׳ גיימינג / E-Sports", "gamepad2", "entertainment"),
    AmenityDefinition("library", "Library / Reading Room", "ספרייה / חדר קריאה", "bookopen", "entertainment"),
    AmenityDefinition("art-gallery", "Art Gallery / Exhibition Space", "גלריית אמנות / תערוכות", "palette", "entertainment"),
    AmenityDefinition("music-room", "Music Room / Piano Room", "חדר מוזיקה / פסנתר", "music", "entertainment"),
    AmenityDefinition("karaoke-room", "Karaoke Room", "חדר קריוקי", "mic", "entertainment"),
    AmenityDefinition("event-hall", "Multipurpose / Event Hall", "אולם אירועים רב תכליתי", "star", "entertainment"),
    AmenityDefinition("ballroom", "Ballroom", "אולם נשפים", "star", "entertainment"),
    AmenityDefinition("private-members-club", "Private Members Club", "מועדון חברים פרטי", "star", "entertainment"),
    AmenityDefinition("vip-owner-lounge", "VIP Owner Lounge", "טרקלין VIP לבעלים", "star", "entertainment"),
    AmenityDefinition("amphitheatre", "Outdoor Amphitheatre", "אמפיתיאטרון חיצוני", "sparkles", "entertainment"),
    AmenityDefinition("sculpture-garden", "Sculpture Garden", "גן פסלים", "sparkles", "entertainment"),

    # Work & Business
    AmenityDefinition("business-centre", "Business Centre", "מרכז עסקים", "briefcase", "work"),
    AmenityDefinition("co-working-space", "Co-Working Space", "חלל עבודה משותף (קו-וורקינג)", "monitor", "work"),
    AmenityDefinition("meeting-rooms", "Meeting Rooms / Boardroom", "חדרי ישיבות / דירקטוריון", "users", "work"),
    AmenityDefinition("conference-room", "Conference Room", "חדר כנסים", "users", "work"),
    AmenityDefinition("video-conference-room", "Video Conferencing Room", "חדר וידאו קונפרנס", "video", "work"),
    AmenityDefinition("presentation-area", "Presentation Area", "אזור מצגות", "monitor", "work"),
    AmenityDefinition("study-rooms", "Study Rooms", "חדרי לימוד", "bookopen", "work"),
    AmenityDefinition("business-lounge", "Business Lounge", "טרקלין עסקים", "briefcase", "work"),
    AmenityDefinition("podcast-room", "Podcast / Content Room", "חדר פודקאסט / תוכן", "mic", "work"),
    AmenityDefinition("acoustic-music-room", "Acoustic Music Room", "חדר מוזיקה אקוסטי", "music", "work"),

    # Dining & BBQ
    AmenityDefinition("bbq-area", "BBQ Area / Barbecue Deck", "אזור ברביקיו", "flame", "dining"),
    AmenityDefinition("outdoor-kitchen", "Outdoor Kitchen / Grill Stations", "מטבח חיצוני / עמדות גריל", "flame", "dining"),
    AmenityDefinition("rooftop-bbq", "Rooftop BBQ Terrace", "ברביקיו קהילתי על הגג", "flame", "dining"),
    AmenityDefinition("chefs-table", "Chef's Table / Show Kitchen", "שולחן שף / מטבח פתוח", "utensilscrossed", "dining"),
    AmenityDefinition("private-dining", "Private Dining Room", "חדר אוכל פרטי", "utensilscrossed", "dining"),
    AmenityDefinition("outdoor-dining", "Outdoor Dining Area", "אזור אכילה חיצוני", "sun", "dining"),
    AmenityDefinition("shared-kitchen", "Shared / Community Kitchen", "מטבח משותף", "utensilscrossed", "dining"),
    AmenityDefinition("cafeteria", "Cafeteria / Canteen", "קפיטריה", "coffee", "dining"),
    AmenityDefinition("onsite-restaurants", "On-Site Restaurants & Cafés", "מסעדות ובתי קפה במתחם", "coffee", "dining"),
    AmenityDefinition("fine-dining", "Fine Dining Restaurant", "מסעדת פיין דיינינג", "star", "dining"),
    AmenityDefinition("floating-restaurant", "Floating Restaurant", "מסעדה צפה", "ship", "dining"),

    # Beach & Waterfront
    AmenityDefinition("private-beach", "Private Beach / Beach Access", "חוף פרטי / גישה לחוף", "umbrella", "beach"),
    AmenityDefinition("beach-club", "Residents Beach Club", "מועדון חוף לדיירים", "star", "beach"),
    AmenityDefinition("beach-cabanas", "Beachfront Cabanas", "קבאנות חוף", "sun", "beach"),
    AmenityDefinition("beach-attendant", "Beach Attendant Services", "שירות מלצרים בחוף", "users", "beach"),
    AmenityDefinition("artificial-beach", "Artificial Sandy Beach", "חוף חולי מלאכותי", "umbrella", "beach"),
    AmenityDefinition("pet-beach", "Pet-Friendly Beach", "אזור חוף ידידותי לכלבים", "heart", "beach"),

    # Marina & Yachts
    AmenityDefinition("marina", "Marina / Marina Berths", "מרינה / רציפי עגינה", "anchor", "marina"),
    AmenityDefinition("yacht-club", "Yacht Club", "מועדון יאכטות", "ship", "marina"),
    AmenityDefinition("private-marina", "Private Marina Access", "גישה למרינה פרטית", "anchor", "marina"),
    AmenityDefinition("yacht-cruises", "Yacht Cruises", "שייט יאכטות", "ship", "marina"),
    AmenityDefinition("private-jetty", "Private Jetty / Boat Dock", "רציף פרטי / מעגן סירות", "anchor", "marina"),
    AmenityDefinition("kayak-storage", "Kayak / Paddleboard Storage", "אחסון קיאק / סאפ", "waves", "marina"),

    # Gardens & Outdoors
    AmenityDefinition("landscaped-gardens", "Landscaped Gardens & Lawns", "גנים מעוצבים ומדשאות", "trees", "outdoors"),
    AmenityDefinition("community-parks", "Community Parks / Green Spaces", "פארקים קהילתיים / שטחים ירוקים", "treepine", "outdoors"),
    AmenityDefinition("rooftop-garden", "Rooftop / Sky Garden", "גינת גג / סקיי גארדן", "leaf", "outdoors"),
    AmenityDefinition("podium-garden", "Podium Garden", "גינת פודיום", "treepine", "outdoors"),
    AmenityDefinition("botanical-garden", "Botanical Garden", "גינה בוטנית", "flower", "outdoors"),
    AmenityDefinition("zen-garden", "Zen Garden", "גינת זן", "sparkles", "outdoors"),
    AmenityDefinition("sensory-garden", "Sensory Garden", "גינה חושית", "flower2", "outdoors"),
    AmenityDefinition("fragrance-garden", "Fragrance Garden", "גינת ניחוחות (יסמין/לבנדר)", "flower", "outdoors"),
    AmenityDefinition("edible-garden", "Edible / Hydroponic Garden", "גינה אכילה / הידרופונית", "leaf", "outdoors"),
    AmenityDefinition("community-garden", "Community Garden Plots", "חלקות גינה קהילתיות", "leaf", "outdoors"),
    AmenityDefinition("courtyard", "Courtyard", "חצר פנימית", "trees", "outdoors"),
    AmenityDefinition("picnic-area", "Picnic Area / Pavilion", "אזור פיקניק", "sun", "outdoors"),
    AmenityDefinition("open-lawns", "Open Lawns / Event Lawn", "מדשאות פתוחות / אירועים", "trees", "outdoors"),
    AmenityDefinition("forest-walk", "Forest Walk", "טיילת יער", "treepine", "outdoors"),
    AmenityDefinition("nature-trails", "Nature / Walking Trails", "שבילי טבע / הליכה", "footprints", "outdoors"),
    AmenityDefinition("jogging-track", "Jogging / Running Track", "שביל ריצה / ג׳וגינג", "footprints", "outdoors"),
    AmenityDefinition("cycling-track", "Cycling Track", "שביל אופניים", "bike", "outdoors"),
    AmenityDefinition("shaded-walkways", "Shaded Walkways", "שבילים מוצלים / מדרכות", "footprints", "outdoors"),
    AmenityDefinition("waterfront-promenade", "Waterfront Promenade / Boardwalk", "טיילת חוף / בורדווק", "waves", "outdoors"),
    AmenityDefinition("sun-deck", "Sun Deck / Sunbathing Terrace", "דק שמש / מרפסת שיזוף", "sun", "outdoors"),
    AmenityDefinition("fire-pits", "Bonfire / Fire Pits", "מדורות / פיירפיט", "flame", "outdoors"),
    AmenityDefinition("hammock-zone", "Hammock Zone", "אזור ערסלים", "sun", "outdoors"),
    AmenityDefinition("green-corridors", "Green Corridors", "מסדרונות ירוקים", "treepine", "outdoors"),

    # Pets
    AmenityDefinition("pet-friendly", "Pets Allowed / Pet-Friendly", "מדיניות ידידותית לחיות מחמד", "check", "pets"),
    AmenityDefinition("dog-park", "Dog Park / Pet Park", "פארק כלבים", "trees", "pets"),
    AmenityDefinition("pet-play-area", "Pet Play Area (Fenced)", "אזור משחק לחיות (גדר/אג׳יליטי)", "activity", "pets"),
    AmenityDefinition("pet-grooming", "Pet Grooming Salon / Pet Spa", "סלון טיפוח / ספא לחיות", "sparkles", "pets"),
    AmenityDefinition("pet-walking-paths", "Pet-Friendly Walking Paths", "שבילי הליכה ידידותיים לחיות", "footprints", "pets"),

    # Services & Concierge
    AmenityDefinition("concierge-247", "24/7 Concierge Service", "שירות קונסיירז׳ 24/7", "bell", "services"),
    AmenityDefinition("ai-concierge", "AI Virtual Concierge", "קונסיירז׳ וירטואלי AI", "smartphone", "services"),
    AmenityDefinition("butler-service", "Butler Service", "שירות באטלר", "star", "services"),
    AmenityDefinition("doorman-porter", "Doorman & Porter", "שוער ופורטר", "users", "services"),
    AmenityDefinition("valet-parking", "Valet Parking Service", "שירות חניון (ולט)", "car", "services"),
    AmenityDefinition("housekeeping", "Housekeeping / Maid Service", "ניקיון / משק בית", "sparkles", "services"),
    AmenityDefinition("room-service", "In-Villa Dining / Room Service", "הגשת אוכל ליחידה", "utensilscrossed", "services"),
    AmenityDefinition("laundry-service", "Laundry & Dry Cleaning", "כביסה וניקוי יבש", "sparkles", "services"),
    AmenityDefinition("chauffeur-service", "Chauffeur / Limousine Service", "שירות נהג / לימוזינה", "car", "services"),
    AmenityDefinition("bodyguard-service", "Bodyguard Service", "שירות מאבטח אישי", "shield", "services"),
    AmenityDefinition("floristry", "Floristry Services", "שירותי פרחים", "flower", "services"),
    AmenityDefinition("personal-shopping", "Personal Shopping", "סיוע בקניות אישיות", "shoppingbag", "services"),
    AmenityDefinition("travel-coordination", "Travel Coordination", "תיאום נסיעות / הזמנות", "plane", "services"),
    AmenityDefinition("event-planning", "Event Planning", "תכנון אירועים", "star", "services"),
    AmenityDefinition("babysitting", "Babysitting / Nanny Coordination", "תיאום בייביסיטר / מטפלת", "baby", "services"),
    AmenityDefinition("car-wash", "Automatic Car Wash", "שטיפת רכב אוטומטית", "car", "services"),
    AmenityDefinition("pool-beach-service", "Beach/Pool F&B Service", "שירות מלצרים בחוף/בריכה", "sun", "services"),
    AmenityDefinition("maintenance-staff", "Maintenance Staff", "צוות תחזוקה", "wrench", "services"),
    AmenityDefinition("maintenance-24h", "24-Hour Maintenance", "תחזוקה 24 שעות", "timer", "services"),

    # Security & Access
    AmenityDefinition("security-247", "24/7 Security", "אבטחה 24/7", "shield", "security"),
    AmenityDefinition("cctv", "CCTV Surveillance", "מצלמות אבטחה (CCTV)", "camera", "security"),
    AmenityDefinition("gated-community", "Gated Community", "קהילה סגורה / גישה מבוקרת", "lock", "security"),
    AmenityDefinition("biometric-access", "Biometric Access", "כניסה ביומטרית", "key", "security"),
    AmenityDefinition("keycard-access", "Key Card Access", "כניסה בכרטיס", "key", "security"),
    AmenityDefinition("private-elevator", "Private / Dedicated Elevator", "מעלית פרטית / ייעודית", "lock", "security"),
    AmenityDefinition("access-elevators", "Access-Controlled Elevators", "מעליות עם בקרת גישה", "lock", "security"),
    AmenityDefinition("private-lobby", "Private Lobby / Entrance", "לובי פרטי / כניסה ייעודית", "lock", "security"),
    AmenityDefinition("staff-entrances", "Discreet Staff Entrances", "כניסות צוות נפרדות", "eye", "security"),
    AmenityDefinition("intercom", "Intercom / Video Entry", "אינטרקום / כניסת וידאו", "phone", "security"),
    AmenityDefinition("visitor-management", "Visitor Management System", "מערכת ניהול מבקרים", "monitor", "security"),
    AmenityDefinition("fire-safety", "Fire Safety System", "מערכת כיבוי אש", "shield", "security"),
    AmenityDefinition("guardhouse", "Security Guardhouse", "בית שמירה / שער כניסה", "shield", "security"),
    AmenityDefinition("accessible-facilities", "Accessible / Disabled Facilities", "מתקנים לבעלי מוגבלויות", "users", "security"),

    # Parking & Transport
    AmenityDefinition("covered-parking", "Covered / Underground Parking", "חניה מקורה / תת קרקעית", "car", "parking"),
    AmenityDefinition("dedicated-parking", "Dedicated Parking Spaces", "חניה ייעודית", "car", "parking"),
    AmenityDefinition("visitor-parking", "Guest / Visitor Parking", "חניית אורחים", "car", "parking"),
    AmenityDefinition("private-garage", "Private Garage (Multi-Car)", "מוסך פרטי (רב-מכוני)", "star", "parking"),
    AmenityDefinition("car-elevator", "Private Car Elevator / Car Lift", "מעלית רכב פרטית", "car", "parking"),
    AmenityDefinition("show-garage", "Show Garage (10+ Cars)", "מוסך תצוגה (10+ רכבים)", "star", "parking"),
    AmenityDefinition("ev-charging", "EV Charging Stations", "עמדות טעינה לרכב חשמלי", "zap", "parking"),
    AmenityDefinition("bicycle-storage", "Bicycle Storage", "אחסון אופניים", "bike", "parking"),
    AmenityDefinition("helipad", "Helipad", "נחיתת מסוקים (הליפד)", "plane", "parking"),
    AmenityDefinition("airport-shuttle", "Airport Shuttle / Limousine", "שאטל לשדה תעופה", "car", "parking"),
    AmenityDefinition("mobility-hub", "Mobility Hub", "מרכז ניידות", "car", "parking"),
    AmenityDefinition("metro-access", "Metro Station Access", "גישה לתחנת מטרו", "mappin", "parking"),
    AmenityDefinition("monorail-access", "Palm Monorail Access", "גישה למונורייל", "car", "parking"),
    AmenityDefinition("high-speed-elevators", "High-Speed Elevators", "מעליות מהירות", "activity", "parking"),
    AmenityDefinition("panoramic-elevators", "Panoramic / Glass Elevators", "מעליות פנורמיות / זכוכית", "eye", "parking"),
    AmenityDefinition("drop-off-area", "Drop-Off with Separate Entry", "אזור הורדה עם כניסה נפרדת", "car", "parking"),

    # Technology & Smart Home
    AmenityDefinition("smart-home", "Smart Home Automation", "מערכת בית חכם (תאורה/AC/וילונות)", "home", "tech"),
    AmenityDefinition("voice-control", "Voice-Controlled Systems", "שליטה קולית (אלקסה/גוגל)", "mic", "tech"),
    AmenityDefinition("residents-app", "Residents' App", "אפליקציית דיירים", "smartphone", "tech"),
    AmenityDefinition("fiber-internet", "High-Speed / Fiber Optic Internet", "אינטרנט מהיר / סיבים אופטיים", "wifi", "tech"),
    AmenityDefinition("building-wifi", "In-Building Wi-Fi", "Wi-Fi בשטחים ציבוריים", "wifi", "tech"),
    AmenityDefinition("satellite-tv", "Satellite / Cable TV", "חיבור לוויין / כבלים", "tv", "tech"),
    AmenityDefinition("av-systems", "Integrated AV Systems", "מערכות אודיו/וידאו משולבות", "monitor", "tech"),
    AmenityDefinition("home-panels", "Home Automation Panels", "פאנלים לשליטה על הבית", "smartphone", "tech"),
    AmenityDefinition("energy-monitoring", "Smart Energy Monitoring", "ניטור אנרגיה חכם", "zap", "tech"),
    AmenityDefinition("district-cooling", "District Cooling", "מערכת קירור מרכזית", "thermometer", "tech"),
    AmenityDefinition("power-backup", "Power Backup / Generator", "גיבוי חשמל / גנרטור", "battery", "tech"),
    AmenityDefinition("5g-coverage", "Full 5G Coverage", "כיסוי 5G מלא", "globe", "tech"),
    AmenityDefinition("water-filtration", "Central Water Filtration", "מערכת סינון מים מרכזית", "droplet", "tech"),

    # Retail & Community
    AmenityDefinition("supermarket", "Supermarket / Grocery", "סופרמרקט / מכולת", "shoppingbag", "retail"),
    AmenityDefinition("retail-outlets", "Retail Outlets / Boutiques", "חנויות / בוטיקים", "store", "retail"),
    AmenityDefinition("shopping-mall", "Shopping Mall (Within Community)", "קניון בקהילה", "store", "retail"),
    AmenityDefinition("souk", "Souk (Traditional Market)", "שוק (סוק)", "store", "retail"),
    AmenityDefinition("retail-restaurants", "Restaurants & Cafés", "מסעדות ובתי קפה", "coffee", "retail"),
    AmenityDefinition("pharmacy", "Pharmacy", "בית מרקחת", "heart", "retail"),
    AmenityDefinition("medical-clinic", "Medical Clinic", "מרפאה / מרכז בריאות", "heart", "retail"),
    AmenityDefinition("bank-atm", "Bank / ATM", "בנק / כספומט", "building", "retail"),
    AmenityDefinition("parcel-room", "Smart Parcel / Mail Room", "חדר דואר וחבילות חכם", "package", "retail"),
    AmenityDefinition("dry-cleaners", "Dry Cleaners", "ניקוי יבש", "store", "retail"),
    AmenityDefinition("florist-shop", "Florist", "חנות פרחים", "flower", "retail"),
    AmenityDefinition("pet-shop", "Pet Shop", "חנות חיות מחמד", "heart", "retail"),
    AmenityDefinition("food-court", "Food Court / Food Hall", "פוד קורט / אולם אוכל", "utensilscrossed", "retail"),
    AmenityDefinition("onsite-salon", "On-Site Salon / Barber", "מספרה / סלון יופי במתחם", "sparkles", "retail"),

    # Religious & Cultural
    AmenityDefinition("prayer-room", "Prayer Room / Musalla", "חדר תפילה / מוסאלה", "bookopen", "religious"),
    AmenityDefinition("mosque", "Mosque (Community)", "מסגד בקהילה / בסמוך", "landmark", "religious"),
    AmenityDefinition("community-centre", "Community Centre", "מרכז קהילתי", "users", "religious"),
    AmenityDefinition("cultural-space", "Cultural / Performing Arts", "חלל תרבות / אמנויות", "palette", "religious"),
    AmenityDefinition("music-hall", "Music Hall", "אולם מוזיקה", "music", "religious"),

    # Sustainability & Green
    AmenityDefinition("solar-panels", "Solar Panels", "פאנלים סולאריים", "sun", "sustainability"),
    AmenityDefinition("leed-certification", "LEED / Estidama Certification", "תקן ירוק LEED / אסתדאמה", "award", "sustainability"),
    AmenityDefinition("efficient-hvac", "Energy-Efficient HVAC", "מערכת HVAC חסכונית", "wind", "sustainability"),
    AmenityDefinition("double-glazed", "Double-Glazed Windows", "חלונות זיגוג כפול", "eye", "sustainability"),
    AmenityDefinition("rainwater-recycling", "Rainwater / Water Recycling", "איסוף מי גשם / מיחזור מים", "droplets", "sustainability"),
    AmenityDefinition("greywater-recycling", "Greywater Recycling", "מיחזור מים אפורים", "droplet", "sustainability"),
    AmenityDefinition("green-materials", "Green / Low-VOC Materials", "חומרי בנייה ירוקים / Low-VOC", "leaf", "sustainability"),
    AmenityDefinition("recycling-stations", "Recycling Stations", "תחנות מיחזור", "leaf", "sustainability"),
    AmenityDefinition("energy-walkways", "Energy-Generating Walkways", "מדרכות מייצרות אנרגיה", "zap", "sustainability"),

    # Unit Features
    AmenityDefinition("balcony-terrace", "Balcony / Terrace", "מרפסת / טרסה", "sun", "unit"),
    AmenityDefinition("private-garden-unit", "Private Garden", "גינה פרטית (קרקע/וילה)", "trees", "unit"),
    AmenityDefinition("private-rooftop", "Private Rooftop", "גג פרטי (פנטהאוז)", "sun", "unit"),
    AmenityDefinition("wraparound-balcony", "Wraparound Balcony", "מרפסת עוטפת", "sun", "unit"),
    AmenityDefinition("built-in-wardrobes", "Built-in Wardrobes", "ארונות קיר", "home", "unit"),
    AmenityDefinition("walk-in-closet", "Walk-in Closet / Dressing Room", "חדר ארונות / הלבשה", "home", "unit"),
    AmenityDefinition("maids-room", "Maid's Room", "חדר עוזרת בית", "users", "unit"),
    AmenityDefinition("drivers-room", "Driver's Room", "חדר נהג", "car", "unit"),
    AmenityDefinition("home-office", "Study / Home Office", "חדר עבודה / משרד ביתי", "bookopen", "unit"),
    AmenityDefinition("storage-room", "Storage Room", "מחסן", "package", "unit"),
    AmenityDefinition("laundry-room", "Laundry Room", "חדר כביסה", "droplet", "unit"),
    AmenityDefinition("fitted-kitchen", "Fully Fitted Kitchen", "מטבח מאובזר מלא", "utensilscrossed", "unit"),
    AmenityDefinition("kitchen-appliances", "Kitchen Appliances", "מכשירי חשמל למטבח", "home", "unit"),
    AmenityDefinition("central-ac", "Central A/C", "מיזוג מרכזי", "thermometer", "unit"),
    AmenityDefinition("marble-flooring", "Marble / Stone Flooring", "ריצוף שיש / אבן טבעית", "sparkles", "unit"),
    AmenityDefinition("wood-floors", "Solid Wood Floors", "פרקט עץ מלא", "home", "unit"),
    AmenityDefinition("building-lobby", "Lobby in Building", "לובי בבניין", "building", "unit"),
    AmenityDefinition("front-desk-24h", "24-Hour Front Desk", "קבלה / דלפק קדמי 24/7", "users", "unit"),
    AmenityDefinition("secure-storage", "Secure Storage / Lockers", "אחסון מאובטח / לוקרים", "lock", "unit"),

    # Views & Status
    AmenityDefinition("sea-view", "Sea / Water View", "נוף לים / מים", "waves", "views"),
    AmenityDefinition("landmark-view", "Landmark View", "נוף לציון דרך", "landmark", "views"),
    AmenityDefinition("garden-view", "Garden View", "נוף לגינות", "trees", "views"),
    AmenityDefinition("golf-view", "Golf Course View", "נוף למגרש גולף", "flag", "views"),
    AmenityDefinition("park-view", "Parkland View", "נוף לפארק", "trees", "views"),
    AmenityDefinition("community-view", "Community View", "נוף קהילתי", "building", "views"),
    AmenityDefinition("furnished", "Furnished", "מרוהט", "home", "views"),
    AmenityDefinition("partly-furnished", "Partly Furnished", "מרוהט חלקית", "home", "views"),
    AmenityDefinition("unfurnished", "Unfurnished", "לא מרוהט", "home", "views"),
    AmenityDefinition("vastu-compliant", "Vastu Compliant", "תואם וואסטו", "compass", "views"),
    AmenityDefinition("freehold", "Freehold", "פריהולד", "key", "views"),
    AmenityDefinition("pets-allowed-status", "Pets Allowed", "מותר חיות מחמד", "heart", "views"),
)

# Custom entries are always filed under this category.
CUSTOM_CATEGORY_ID = "views"

# Rotating icon keys for custom entries, indexed by encounter order.
CUSTOM_FALLBACK_ICONS: tuple[str, ...] = (
    "rocket",
    "gem",
    "crown",
    "lightbulb",
    "feather",
    "compass",
    "palette",
    "radio",
    "globe",
    "headphones",
    "mic",
    "camera",
    "zap",
    "award",
    "star",
    "flag",
    "target",
    "flower2",
    "mountain",
    "anchor",
)

POPULAR_AMENITY_IDS: tuple[str, ...] = (
    "swimming-pool",
    "gym",
    "security-247",
    "covered-parking",
    "smart-home",
    "concierge-247",
    "bbq-area",
    "outdoor-playground",
    "ev-charging",
    "fiber-internet",
)

_AMENITY_BY_ID: dict[str, AmenityDefinition] = {}
for _amenity in AMENITIES:
    _AMENITY_BY_ID.setdefault(_amenity.id, _amenity)

_CATEGORY_BY_ID: dict[str, Category] = {category.id: category for category in CATEGORIES}


def get_amenity(amenity_id) -> AmenityDefinition | None:  # noqa: ANN001
    if not isinstance(amenity_id, str):
        return None
    return _AMENITY_BY_ID.get(amenity_id)


def is_catalog_id(value) -> bool:  # noqa: ANN001
    return get_amenity(value) is not None


def get_category(category_id) -> Category | None:  # noqa: ANN001
    if not isinstance(category_id, str):
        return None
    return _CATEGORY_BY_ID.get(category_id)


def find_amenity_by_name(name_he: str, name_en: str) -> AmenityDefinition | None:
    """Return the first catalog entry matching a persisted item's names.

    Matches on the Hebrew name, the English name, or an English field that
    actually holds the Hebrew name (older records stored only one language).
    """
    for amenity in AMENITIES:
        if name_he and amenity.name_he == name_he:
            return amenity
        if name_en and (amenity.name_en == name_en or amenity.name_he == name_en):
            return amenity
    return None


def search_amenities(query: str) -> list[AmenityDefinition]:
    text = (query or "").strip()
    if not text:
        return list(AMENITIES)
    lowered = text.lower()
    return [
        amenity
        for amenity in AMENITIES
        if lowered in amenity.name_en.lower() or text in amenity.name_he or lowered in amenity.id
    ]


def group_by_category(amenities: Iterable[AmenityDefinition]) -> dict[str, list[AmenityDefinition]]:
    groups: dict[str, list[AmenityDefinition]] = {category.id: [] for category in CATEGORIES}
    for amenity in amenities:
        if amenity.category in groups:
            groups[amenity.category].append(amenity)
    return groups


def catalog_problems() -> list[str]:
    problems: list[str] = []
    seen: set[str] = set()
    for amenity in AMENITIES:
        if amenity.id in seen:
            problems.append(f"duplicate amenity id: {amenity.id}")
        seen.add(amenity.id)
        if amenity.category not in _CATEGORY_BY_ID:
            problems.append(f"unknown category '{amenity.category}' on amenity {amenity.id}")
    if CUSTOM_CATEGORY_ID not in _CATEGORY_BY_ID:
        problems.append(f"unknown custom category: {CUSTOM_CATEGORY_ID}")
    for amenity_id in POPULAR_AMENITY_IDS:
        if amenity_id not in _AMENITY_BY_ID:
            problems.append(f"unknown popular amenity id: {amenity_id}")
    return problems
