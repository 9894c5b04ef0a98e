"""English (US) label table."""

LABELS_EN_US: dict[str, str] = {
    # Resident list
    "residents.column.name": "Name",
    "residents.column.responsible_staff": "Responsible Staff",
    "residents.column.birth_date": "Birth Date",
    "residents.column.room": "Room",
    "residents.column.gender": "Gender",
    "residents.column.last_visit": "Last Visit",
    "residents.search.name": "Search by name",
    "residents.not_found": "Resident not found.",
    # Gender
    "gender.short.male": "M",
    "gender.short.female": "F",
    "gender.long.male": "Male",
    "gender.long.female": "Female",
    # Profile
    "profile.uuid": "UUID",
    "profile.image": "Photo",
    "profile.active": "Active",
    "profile.created_at": "Created At",
    "profile.updated_at": "Updated At",
    "profile.created_by": "Created By",
    "profile.updated_by": "Updated By",
    "profile.responsible_staff": "Responsible Staff",
    "profile.first_name": "First Name",
    "profile.last_name": "Last Name",
    "profile.gender": "Gender",
    "profile.room": "Room",
    "profile.date_of_birth": "Date of Birth",
    "profile.birthplace": "Birthplace",
    "profile.nationality": "Nationality",
    "profile.identification_number": "Identification Number",
    "profile.address": "Address",
    "profile.blood_type": "Blood Type",
    "profile.home_phone": "Home Phone",
    "profile.mobile_phone": "Mobile Phone",
    "profile.location": "Location",
    "profile.location.room": "Room $1",
    "profile.location.home": "Home",
    # Health categories
    "health.category.independence": "Independence",
    "health.independence.independent": "Independent",
    "health.independence.partial-assistance": "Partial Assistance",
    "health.independence.full-care": "Full Care",
    "health.category.mobility": "Mobility",
    "health.mobility.normal": "Normal",
    "health.mobility.bedridden": "Bedridden",
    "health.mobility.wheelchair-dependent": "Wheelchair Dependent",
    "health.mobility.crutches-or-cane": "Crutches or Cane",
    "health.mobility.slow-or-unstable-walking": "Slow or Unstable Walking",
    "health.category.motor-function": "Motor Function",
    "health.motor-function.normal-hand-function": "Normal Hand Function",
    "health.motor-function.limited-hand-function": "Limited Hand Function",
    "health.motor-function.fine-motor-difficulty": "Fine Motor Difficulty",
    "health.category.vision": "Vision",
    "health.vision.normal": "Normal",
    "health.vision.impaired": "Impaired",
    "health.vision.blind": "Blind",
    "health.category.hearing": "Hearing",
    "health.hearing.normal": "Normal",
    "health.hearing.impaired": "Impaired",
    "health.hearing.deaf": "Deaf",
    "health.category.cognitive-status": "Cognitive Status",
    "health.cognitive-status.normal-cognition": "Normal Cognition",
    "health.cognitive-status.mild-cognitive-impairment": "Mild Cognitive Impairment",
    "health.cognitive-status.dementia-alzheimers-symptoms": "Dementia / Alzheimer's Symptoms",
    # Health free text
    "health.free-text.chronic-illness": "Chronic Illness",
    "health.free-text.chronic-illness.notes": "List diagnosed chronic conditions.",
    "health.free-text.medications": "Medications",
    "health.free-text.medications.notes": "Include dosage and schedule.",
    "health.free-text.allergies": "Allergies",
    "health.free-text.allergies.notes": "Food, drug and environmental allergies.",
    "health.free-text.medical-history": "Medical History",
    "health.free-text.medical-history.notes": "Past surgeries, hospital stays and major illnesses.",
    # Equipment
    "health.equipment.artificial-pacemaker": "Artificial Pacemaker",
    "health.equipment.catheter": "Catheter",
    "health.equipment.chemotherapy-port": "Chemotherapy Port",
    "health.equipment.cochlear-implant": "Cochlear Implant",
    "health.equipment.contact-lens": "Contact Lens",
    "health.equipment.cpap": "CPAP",
    "health.equipment.eyeglasses": "Eyeglasses",
    "health.equipment.hearing-aid": "Hearing Aid",
    "health.equipment.cardio-defibrillator-iacd": "Cardio Defibrillator (ICD)",
    "health.equipment.insulin-pump": "Insulin Pump",
    "health.equipment.oxygen": "Oxygen",
    "health.equipment.prosthetic-heart-valves": "Prosthetic Heart Valves",
    "health.equipment.bioprosthetic": "Bioprosthetic",
    # Visits
    "visits": "Visits",
    "visits.date": "Date",
    "visits.caretaker": "Caretaker",
    "visits.actions": "Actions",
    "visits.last_visit": "Last Visit",
    "visits.relative": "Relative",
    "visits.category.medical-care": "Medical Care",
    "visits.category.personal-care": "Personal Care",
    "visits.category.housekeeping": "Housekeeping",
    "visits.category.supportive-services": "Supportive Services",
    "visits.group.vital-measurements": "Vital Measurements",
    "visits.group.personal-hygiene": "Personal Hygiene",
    "visits.group.mobility-support": "Mobility Support",
    "visits.group.environmental-hygiene": "Environmental Hygiene",
    "visits.group.meal-service-dietary-monitoring": "Meal Service & Dietary Monitoring",
    "visits.group.activity-support": "Activity Support",
    "visits.action.medication-administration": "Medication Administration",
    "visits.action.wound-care-dressing": "Wound Care / Dressing",
    "visits.action.injections-iv-therapy": "Injections / IV Therapy",
    "visits.action.medical-reporting-referrals": "Medical Reporting & Referrals",
    "visits.action.blood-pressure": "Blood Pressure",
    "visits.action.pulse": "Pulse",
    "visits.action.temperature": "Temperature",
    "visits.action.oxygen-saturation": "Oxygen Saturation",
    "visits.action.toileting-incontinence-care": "Toileting / Incontinence Care",
    "visits.action.dressing-undressing-assistance": "Dressing / Undressing Assistance",
    "visits.action.feeding-assistance": "Feeding Assistance",
    "visits.action.companionship-emotional-support": "Companionship & Emotional Support",
    "visits.action.in-bed-body-cleaning": "In-Bed Body Cleaning",
    "visits.action.bathing-shower-assistance": "Bathing / Shower Assistance",
    "visits.action.hair-cutting-care": "Hair Cutting & Care",
    "visits.action.nail-care": "Nail Care",
    "visits.action.assisted-walking": "Assisted Walking",
    "visits.action.transfers-bed-to-chair": "Transfers (Bed to Chair)",
    "visits.action.wheelchair-use": "Wheelchair Use",
    "visits.action.room-cleaning-tidying": "Room Cleaning / Tidying",
    "visits.action.laundry-clothing-care": "Laundry & Clothing Care",
    "visits.action.bed-linen-changes": "Bed Linen Changes",
    "visits.action.shared-space-maintenance": "Shared Space Maintenance",
    "visits.action.disinfection": "Disinfection",
    "visits.action.odor-control": "Odor Control",
    "visits.action.regular-meals": "Regular Meals",
    "visits.action.tube-feeding": "Tube Feeding",
    "visits.action.iv-nutrition": "IV Nutrition",
    "visits.action.other-nutrition-methods": "Other Nutrition Methods",
    "visits.action.meal-refused": "Meal Refused",
    "visits.action.rehabilitation-exercises": "Rehabilitation Exercises",
    "visits.action.group-activities": "Group Activities",
    # Update log
    "update_log": "Update Log",
    "update_log.date": "Date",
    "update_log.user_id": "User ID",
    "update_log.fields": "Fields",
}
