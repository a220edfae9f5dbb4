"""Schedulable checklist templates, anchored to the due date or the birth date."""
from __future__ import annotations

from typing import List

from ..schemas import MilestoneTemplate

MILESTONE_TEMPLATES: List[MilestoneTemplate] = [
    # Pregnancy (relative to due date)
    MilestoneTemplate(key="first_prenatal_visit", title="First prenatal appointment", description="Confirm the pregnancy, review history, and start prenatal vitamins.", category="pregnancy", offset_weeks=-32, offset_reference="due_date", icon="stethoscope"),
    MilestoneTemplate(key="nt_scan", title="Nuchal translucency scan", description="Optional first-trimester screening ultrasound, usually weeks 11-14.", category="pregnancy", offset_weeks=-28, offset_reference="due_date", icon="scan"),
    MilestoneTemplate(key="anatomy_scan", title="Anatomy scan", description="Detailed mid-pregnancy ultrasound between weeks 18 and 22.", category="pregnancy", offset_weeks=-20, offset_reference="due_date", icon="scan"),
    MilestoneTemplate(key="childcare_research", title="Research childcare options", description="Waitlists fill up early. Tour daycares or interview nannies.", category="pregnancy", offset_weeks=-20, offset_reference="due_date", icon="search"),
    MilestoneTemplate(key="start_registry", title="Start your baby registry", description="List the essentials before the third trimester gets busy.", category="pregnancy", offset_weeks=-18, offset_reference="due_date", icon="gift"),
    MilestoneTemplate(key="glucose_screening", title="Glucose screening test", description="Gestational diabetes screening, usually weeks 24-28.", category="pregnancy", offset_weeks=-14, offset_reference="due_date", icon="clipboard"),
    MilestoneTemplate(key="choose_pediatrician", title="Choose a pediatrician", description="Meet a few practices and confirm they accept your insurance.", category="pregnancy", offset_weeks=-12, offset_reference="due_date", icon="search"),
    MilestoneTemplate(key="childbirth_class", title="Take a childbirth class", description="Learn about labor stages, pain relief, and newborn care.", category="pregnancy", offset_weeks=-10, offset_reference="due_date", icon="book"),
    MilestoneTemplate(key="birth_plan", title="Write your birth plan", description="Share your preferences for labor and delivery with your provider.", category="pregnancy", offset_weeks=-8, offset_reference="due_date", icon="file-text"),
    MilestoneTemplate(key="install_car_seat", title="Install the car seat", description="Install it and have it inspected before the due date.", category="pregnancy", offset_weeks=-5, offset_reference="due_date", icon="car"),
    MilestoneTemplate(key="gbs_test", title="Group B strep test", description="Routine swab between weeks 36 and 37.", category="pregnancy", offset_weeks=-4, offset_reference="due_date", icon="clipboard"),
    MilestoneTemplate(key="pack_hospital_bag", title="Pack your hospital bag", description="Clothes, toiletries, documents, and a going-home outfit for baby.", category="pregnancy", offset_weeks=-4, offset_reference="due_date", icon="briefcase"),
    # Postpartum (relative to birth)
    MilestoneTemplate(key="newborn_checkup", title="Newborn checkup", description="First pediatric visit, usually 3-5 days after birth.", category="postpartum", offset_weeks=0, offset_reference="birth", icon="stethoscope"),
    MilestoneTemplate(key="birth_certificate", title="Register the birth", description="File for the birth certificate and social security number.", category="postpartum", offset_weeks=1, offset_reference="birth", icon="file-text"),
    MilestoneTemplate(key="add_to_insurance", title="Add baby to health insurance", description="Most plans require enrollment within 30 days of birth.", category="postpartum", offset_weeks=2, offset_reference="birth", icon="shield"),
    MilestoneTemplate(key="postpartum_checkup", title="Postpartum checkup", description="Your own recovery visit, typically around six weeks after delivery.", category="postpartum", offset_weeks=6, offset_reference="birth", icon="heart"),
    # Development (relative to birth)
    MilestoneTemplate(key="well_visit_2m", title="2-month well visit", description="Growth check and first round of routine vaccines.", category="development", offset_weeks=8, offset_reference="birth", icon="syringe"),
    MilestoneTemplate(key="well_visit_4m", title="4-month well visit", description="Growth check and second round of routine vaccines.", category="development", offset_weeks=17, offset_reference="birth", icon="syringe"),
    MilestoneTemplate(key="start_solids", title="Start solid foods", description="Look for readiness signs like sitting with support and interest in food.", category="development", offset_weeks=26, offset_reference="birth", icon="apple"),
    MilestoneTemplate(key="well_visit_6m", title="6-month well visit", description="Growth check, vaccines, and a conversation about solids.", category="development", offset_weeks=26, offset_reference="birth", icon="syringe"),
    MilestoneTemplate(key="babyproof_home", title="Babyproof the home", description="Gates, outlet covers, and anchored furniture before crawling starts.", category="development", offset_weeks=30, offset_reference="birth", icon="home"),
    MilestoneTemplate(key="first_dental_visit", title="First dental visit", description="Schedule once the first tooth appears or by the first birthday.", category="development", offset_weeks=52, offset_reference="birth", icon="smile"),
    MilestoneTemplate(key="well_visit_12m", title="12-month well visit", description="Growth check, lead screening, and one-year vaccines.", category="development", offset_weeks=52, offset_reference="birth", icon="syringe"),
    MilestoneTemplate(key="well_visit_18m", title="18-month well visit", description="Developmental screening and catch-up vaccines.", category="development", offset_weeks=78, offset_reference="birth", icon="syringe"),
    MilestoneTemplate(key="well_visit_24m", title="2-year well visit", description="Developmental and autism screening.", category="development", offset_weeks=104, offset_reference="birth", icon="syringe"),
    MilestoneTemplate(key="preschool_applications", title="Preschool applications", description="Many programs open enrollment a year ahead.", category="development", offset_weeks=130, offset_reference="birth", icon="school"),
    MilestoneTemplate(key="kindergarten_registration", title="Kindergarten registration", description="Check district deadlines and required documents.", category="development", offset_weeks=240, offset_reference="birth", icon="school"),
]
