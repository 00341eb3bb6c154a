"""Per-dimension evaluators used by the match scorer."""

from .bonus import BonusEvaluator, calculate_bonus_score
from .education import EducationEvaluator, calculate_education_score
from .experience import ExperienceEvaluator, calculate_experience_score
from .location import LocationEvaluator, calculate_location_score
from .skills import SkillEvaluator, calculate_skill_score
from .soft_skills import SoftSkillsEvaluator, calculate_soft_skills_score
from .technology import TechnologyEvaluator, calculate_technology_score
from .title import TitleEvaluator, calculate_title_score

__all__ = [
    "BonusEvaluator",
    "EducationEvaluator",
    "ExperienceEvaluator",
    "LocationEvaluator",
    "SkillEvaluator",
    "SoftSkillsEvaluator",
    "TechnologyEvaluator",
    "TitleEvaluator",
    "calculate_bonus_score",
    "calculate_education_score",
    "calculate_experience_score",
    "calculate_location_score",
    "calculate_skill_score",
    "calculate_soft_skills_score",
    "calculate_technology_score",
    "calculate_title_score",
]
