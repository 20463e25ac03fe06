# app/content/catalogs.py
"""
Static enrichment content attached to each recommendation.

Templates containing "{name}" / "{name_lower}" / "{id}" / "{type}" are
filled per business by app.domain.services.enrichment.
"""
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

_PEXELS = "https://images.pexels.com/photos/{}/pexels-photo-{}.jpeg?auto=compress&cs=tinysrgb&w=400"


def _photo(pid: int) -> str:
    return _PEXELS.format(pid, pid)


def _res(title: str, link: str, type_: str, duration: str, level: str) -> Dict[str, str]:
    return {"title": title, "link": link, "type": type_, "duration": duration, "level": level}


RESOURCES: Mapping[str, Tuple[Dict[str, str], ...]] = MappingProxyType({
    "tailoring": (
        _res("Complete Tailoring Masterclass", "https://www.youtube.com/results?search_query=tailoring+masterclass", "Video Course", "40-50 hours", "All Levels"),
        _res("Sewing Machine Operation & Maintenance", "https://www.skillshare.com/classes/sewing-basics", "Online Course", "10-15 hours", "Beginner"),
        _res("Fashion Design Fundamentals", "https://www.coursera.org/courses?query=fashion%20design", "University Course", "6-8 weeks", "Intermediate"),
        _res("Business Registration for Tailoring", "https://udyamregistration.gov.in/", "Government Portal", "1-2 hours", "Beginner"),
    ),
    "cooking": (
        _res("Professional Cooking Techniques", "https://www.youtube.com/results?search_query=professional+cooking+course", "Video Course", "30-40 hours", "All Levels"),
        _res("Food Safety & Hygiene Certification", "https://www.fssai.gov.in/", "Government Certification", "2-3 days", "Required"),
        _res("Catering Business Setup", "https://www.skillindiadigital.gov.in/", "Online Training", "5-10 hours", "Beginner"),
        _res("Recipe Development & Costing", "https://www.udemy.com/courses/search/?q=recipe%20development", "Professional Course", "15-20 hours", "Intermediate"),
    ),
    "handicrafts": (
        _res("Traditional Indian Handicrafts", "https://www.youtube.com/results?search_query=indian+handicrafts+tutorial", "Video Tutorial", "25-35 hours", "All Levels"),
        _res("Handicrafts Marketing Online", "https://www.amazon.in/gp/seller/registration", "E-commerce Setup", "3-5 hours", "Beginner"),
        _res("Art & Craft Business Management", "https://www.skillindiadigital.gov.in/", "Business Course", "10-15 hours", "Intermediate"),
        _res("Product Photography for Crafts", "https://www.skillshare.com/classes/product-photography", "Skills Course", "5-8 hours", "Beginner"),
    ),
    "tutoring": (
        _res("Online Teaching Methodology", "https://www.coursera.org/courses?query=online%20teaching", "Professional Course", "20-30 hours", "All Levels"),
        _res("Zoom & Online Platform Mastery", "https://support.zoom.us/hc/en-us", "Technical Training", "5-10 hours", "Beginner"),
        _res("Student Assessment Techniques", "https://www.edx.org/learn/education", "Educational Course", "15-20 hours", "Intermediate"),
        _res("Tutoring Business Setup", "https://udyamregistration.gov.in/", "Business Registration", "2-3 hours", "Required"),
    ),
    "beauty_services": (
        _res("Professional Makeup Artistry", "https://www.youtube.com/results?search_query=professional+makeup+course", "Video Course", "35-45 hours", "All Levels"),
        _res("Skin Care & Beauty Therapy", "https://www.vlccwellness.com/courses/", "Professional Course", "3-6 months", "Beginner"),
        _res("Beauty Salon Management", "https://www.skillindiadigital.gov.in/", "Business Course", "10-15 hours", "Intermediate"),
        _res("Beauty Service Hygiene Standards", "https://mohfw.gov.in/", "Health Guidelines", "2-3 hours", "Required"),
    ),
    "online_business": (
        _res("Digital Marketing Fundamentals", "https://www.google.com/digital-garage/courses/digital-marketing", "Free Course", "40 hours", "Beginner"),
        _res("E-commerce Platform Setup", "https://www.shopify.com/blog/how-to-start-an-online-store", "Technical Guide", "8-12 hours", "Beginner"),
        _res("Social Media Marketing Mastery", "https://www.facebook.com/business/learn", "Platform Training", "15-20 hours", "Intermediate"),
        _res("Online Business Legal Compliance", "https://www.mca.gov.in/", "Government Resource", "3-5 hours", "Important"),
    ),
})

GENERAL_RESOURCES: Tuple[Dict[str, str], ...] = (
    _res("General Business Setup Guide", "https://udyamregistration.gov.in/", "Government Portal", "2-3 hours", "Beginner"),
    _res("Small Business Management", "https://www.skillindiadigital.gov.in/", "Online Course", "10-15 hours", "All Levels"),
)

FINANCIAL_PLAN: Dict[str, Any] = {
    "investment": "₹15,000 - ₹1,00,000",
    "profit_margin": "25% - 50%",
    "break_even": "3 - 8 months",
    "monthly_income": "₹20,000 - ₹1,00,000",
    "equipment_cost": "₹10,000 - ₹80,000",
    "operational_expense": "₹3,000 - ₹15,000/month",
    "initialSalesVolume": "15-30 orders per month",
    "scalingStrategy": {
        "month3": "Focus on building customer base through quality work",
        "month6": "Expand services and customer base",
        "month12": "Consider expansion based on demand",
    },
    "toolsNeeded": ["Essential Equipment", "Quality Materials", "Business Tools"],
}

CASE_STUDIES: Tuple[Dict[str, Any], ...] = (
    {
        "name": "Priya Sharma",
        "location": "Mumbai, Maharashtra",
        "story": (
            "Started as a homemaker with {name_lower} skills. Initially struggled with "
            "no business experience and faced financial constraints."
        ),
        "achievement": "Now runs a successful business earning ₹50,000+ monthly with 100+ regular customers.",
        "profilePic": _photo(1239291),
        "contactInfo": {
            "email": "priya.success@gmail.com",
            "phone": "+91-9876543210",
            "linkedin": "https://linkedin.com/in/priyasharma",
        },
        "journey": {
            "failures": [
                "First 3 months with zero customers",
                "Lost ₹15,000 in wrong inventory purchase",
                "Struggled with pricing and competition",
            ],
            "turningPoint": "Started focusing on quality and customer relationships instead of competing on price",
            "successStory": (
                "Built trust through consistent quality work, expanded through word-of-mouth "
                "referrals, and now mentors other women entrepreneurs"
            ),
        },
        "quote": "Every failure taught me something valuable. Persistence and quality work always pay off.",
    },
    {
        "name": "Rajesh Kumar",
        "location": "Delhi, Delhi",
        "story": (
            "Former IT professional who left corporate job to start {name_lower} business. "
            "Faced initial skepticism from family and friends."
        ),
        "achievement": "Built a team of 8 people and expanded to 3 cities with annual revenue of ₹25 lakhs.",
        "profilePic": _photo(220453),
        "contactInfo": {
            "email": "rajesh.entrepreneur@gmail.com",
            "phone": "+91-9123456789",
            "linkedin": "https://linkedin.com/in/rajeshkumar",
        },
        "journey": {
            "failures": [
                "Quit high-paying job without proper planning",
                "First business location failed due to poor market research",
                "Lost ₹2 lakhs in first 6 months",
            ],
            "turningPoint": "Joined a business mentor program and learned proper market analysis and financial planning",
            "successStory": "Systematically analyzed market gaps, built strong processes, and scaled methodically",
        },
        "quote": "Business is not just about passion - it needs proper planning, execution, and continuous learning.",
    },
)

WORKFORCE_PLAN: Dict[str, Any] = {
    "initialTeamSize": 1,
    "roles": ["Primary Service Provider", "Quality Controller"],
    "growthPlan": {
        "month3": "Start solo while building customer base",
        "month6": "Consider hiring part-time help",
        "month12": "Expand team based on demand",
    },
    "soloTips": [
        "Focus on quality and customer satisfaction",
        "Build strong supplier relationships",
        "Use time management effectively",
    ],
}

MENTORS: Tuple[Dict[str, Any], ...] = (
    {
        "id": "mentor_{id}_001",
        "name": "Krishna Kumar",
        "profilePic": _photo(2379004),
        "specialization": ["{name}", "Business Management", "Financial Planning"],
        "businessType": "{type}",
        "experience": "8+ years in business",
        "rating": 4.9,
        "totalMentees": 45,
        "fees": {"consultation": "₹800/hour", "monthly": "₹4,500/month", "package": "₹12,000 (3 months)"},
        "contact": {
            "email": "krishnakumar1572004@gmail.com",
            "phone": "+91-9876543210",
            "whatsapp": "+91-9876543210",
            "linkedin": "https://linkedin.com/in/krishnakumar",
        },
        "address": {"city": "Bangalore", "state": "Karnataka", "area": "Koramangala"},
        "availability": {"mode": "both", "timings": ["9:00 AM - 11:00 AM", "3:00 PM - 6:00 PM"], "timezone": "IST"},
        "languages": ["Hindi", "English", "Telugu", "Kannada"],
        "bio": (
            "Expert entrepreneur with 8+ years of experience in {name_lower} and business development. "
            "Specializes in helping beginners start and scale their businesses profitably."
        ),
        "achievements": [
            "Built and sold 2 successful businesses",
            "Mentored 45+ entrepreneurs to profitability",
            "Featured in Entrepreneur India magazine",
            "Speaker at startup events",
        ],
        "testimonials": [
            {
                "name": "Meera Patel",
                "business": "{name}",
                "feedback": (
                    "Krishna helped me turn my hobby into a ₹40,000/month business within 6 months. "
                    "His practical advice and constant support made all the difference."
                ),
                "rating": 5,
            },
            {
                "name": "Amit Singh",
                "business": "Service Business",
                "feedback": "Clear guidance on pricing, customer acquisition, and scaling. Worth every rupee spent on mentorship.",
                "rating": 5,
            },
        ],
    },
    {
        "id": "mentor_{id}_002",
        "name": "Narada Shishivaram",
        "profilePic": _photo(1681010),
        "specialization": ["Market Research", "Digital Marketing", "{name}"],
        "businessType": "{type}",
        "experience": "6+ years in business",
        "rating": 4.7,
        "totalMentees": 32,
        "fees": {"consultation": "₹600/hour", "monthly": "₹3,500/month", "package": "₹9,500 (3 months)"},
        "contact": {
            "email": "naradashishivaram25@gmail.com",
            "phone": "+91-9123456789",
            "whatsapp": "+91-9123456789",
            "linkedin": "https://linkedin.com/in/naradashishivaram",
        },
        "address": {"city": "Chennai", "state": "Tamil Nadu", "area": "T. Nagar"},
        "availability": {"mode": "online", "timings": ["10:00 AM - 1:00 PM", "4:00 PM - 7:00 PM"], "timezone": "IST"},
        "languages": ["Tamil", "English", "Hindi"],
        "bio": (
            "Digital marketing expert and business strategist with 6+ years of experience. "
            "Specializes in helping traditional businesses establish strong online presence and customer acquisition."
        ),
        "achievements": [
            "Helped 100+ businesses go digital",
            "Generated ₹50+ crores in revenue for clients",
            "Certified Google Ads and Facebook Marketing expert",
            "TEDx speaker on digital entrepreneurship",
        ],
        "testimonials": [
            {
                "name": "Lakshmi Devi",
                "business": "Handicrafts",
                "feedback": (
                    "Narada helped me sell my crafts online and increased my income by 300% in just 4 months. "
                    "Amazing digital marketing strategies!"
                ),
                "rating": 5,
            },
        ],
    },
    {
        "id": "mentor_{id}_003",
        "name": "Rakesh Kolipaka",
        "profilePic": _photo(1222271),
        "specialization": ["Operations Management", "Supply Chain", "{name}"],
        "businessType": "{type}",
        "experience": "10+ years in business",
        "rating": 4.8,
        "totalMentees": 28,
        "fees": {"consultation": "₹700/hour", "monthly": "₹4,000/month", "package": "₹11,000 (3 months)"},
        "contact": {
            "email": "rakeshkolipaka2125@gmail.com",
            "phone": "+91-9987654321",
            "whatsapp": "+91-9987654321",
            "linkedin": "https://linkedin.com/in/rakeshkolipaka",
        },
        "address": {"city": "Hyderabad", "state": "Telangana", "area": "Hitech City"},
        "availability": {"mode": "both", "timings": ["8:00 AM - 10:00 AM", "6:00 PM - 8:00 PM"], "timezone": "IST"},
        "languages": ["Telugu", "Hindi", "English"],
        "bio": (
            "Operations and supply chain expert with 10+ years of experience in scaling businesses. "
            "Specializes in process optimization, cost reduction, and efficient operations setup."
        ),
        "achievements": [
            "Reduced operational costs by 40% for 50+ businesses",
            "Built supply chain networks across South India",
            "MBA from IIM with specialization in Operations",
            "Published author on business operations",
        ],
        "testimonials": [
            {
                "name": "Suresh Reddy",
                "business": "Manufacturing",
                "feedback": (
                    "Rakesh helped me streamline my operations and reduce costs significantly. "
                    "His systematic approach saved me lakhs of rupees."
                ),
                "rating": 5,
            },
        ],
    },
)

DATA_SOURCES: Tuple[Dict[str, str], ...] = (
    {
        "name": "National Skill Development Corporation (NSDC)",
        "url": "https://www.nsdcindia.org/",
        "description": "Government database of skill development programs and success stories",
        "lastUpdated": "2024-12-01",
    },
    {
        "name": "Ministry of MSME",
        "url": "https://msme.gov.in/",
        "description": "Official government data on MSME schemes and business opportunities",
        "lastUpdated": "2024-11-15",
    },
    {
        "name": "Startup India Database",
        "url": "https://www.startupindia.gov.in/",
        "description": "Comprehensive database of registered startups and business models",
        "lastUpdated": "2024-12-05",
    },
    {
        "name": "Industry Association Reports",
        "url": "https://www.cii.in/",
        "description": "Confederation of Indian Industry reports on sector-wise business opportunities",
        "lastUpdated": "2024-11-30",
    },
)

GUIDANCE: Dict[str, Any] = {
    "goalBased": {
        "primaryGoal": "Establish a profitable {name_lower} business within 6-12 months",
        "shortTermObjectives": [
            "Complete skill assessment and training within 2 months",
            "Set up basic business infrastructure in 3-4 months",
            "Acquire first 10-15 customers within 6 months",
        ],
        "longTermVision": (
            "Build a sustainable {name_lower} business generating ₹50,000+ monthly income and "
            "potentially scale to multiple locations or expand service offerings"
        ),
    },
    "financial": {
        "totalInvestmentNeeded": "₹25,000 - ₹1,50,000 (depending on scale)",
        "monthlyBudget": "₹5,000 - ₹20,000 for operations",
        "expectedROI": "150-300% within first year",
        "riskLevel": "medium",
    },
    "moralSupport": {
        "motivationalMessage": (
            "You have valuable skills that people need. Every successful entrepreneur started where "
            "you are now. Your journey to financial independence begins with the first step."
        ),
        "commonChallenges": [
            "Initial customer acquisition difficulties",
            "Pricing your services competitively",
            "Managing time between production and marketing",
            "Dealing with seasonal demand fluctuations",
        ],
        "successMindset": [
            "Focus on quality over quantity initially",
            "Customer satisfaction leads to word-of-mouth referrals",
            "Continuous learning and skill improvement",
            "Network with other entrepreneurs and mentors",
        ],
    },
    "patience": {
        "timeToBreakEven": "4-8 months with consistent effort",
        "difficultyLevel": "Moderate - requires dedication and learning",
        "persistenceRequired": "High - especially during the first 6 months when building customer base",
    },
    "lifeLessons": [
        "Business teaches you to solve problems creatively",
        "Customer relationships are more valuable than quick profits",
        "Financial discipline and planning become essential life skills",
        "Resilience and adaptability are key to long-term success",
        "Time management skills improve significantly",
        "Confidence grows as you overcome challenges independently",
    ],
}

ALGORITHM_FEATURES: List[str] = [
    "Skill Matching",
    "Experience Level",
    "Location Preference",
    "Business Type Alignment",
]
TRAINING_DATA = "Business Profiles and Success Stories"
