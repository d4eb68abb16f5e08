# Import every model so metadata (create_all, Flask-Migrate) sees all tables.
from .admin_credential import AdminCredential
from .block import PageBlock
from .conditions import ConditionsSection, EyeCondition
from .doctor import DoctorProfile, Qualification
from .faq import Faq
from .get_started import GetStartedContent
from .hero_section import HeroSection
from .holiday import Holiday, HOLIDAY_TYPES
from .service import Service
from .testimonial import Testimonial
from .why_choose import BenefitCard, WhyChooseSection
