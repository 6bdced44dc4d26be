"""Friendly CSV column names for the scanner's measurement layouts.

The export header is only sniffed for its modality, so column names are
positional: the n-th measurement block (or value) gets the n-th label below.
Positions past the end of a table fall back to a numbered name.
"""

IDENTIFIER_COLUMNS = ["Last_Name", "First_Name", "Patient_ID", "Measure_Date"]

MEASUREMENT_SUFFIXES = ["Total", "Left", "Right", "Delta"]

BODY_COMPOSITION_REGIONS = ["Arms", "Legs", "Trunk", "Android", "Gynoid", "Total", "TBLH"]

MASS_TISSUES = ["Bone", "Fat", "Lean", "Tissue", "Fat_Free", "Total"]

PERCENT_BASES = ["Region", "Tissue"]

TOTAL_BODY_REGIONS = [
    "Head",
    "Arms",
    "Legs",
    "Trunk",
    "Ribs",
    "Pelvis",
    "Spine",
    "Arm_Left",
    "Leg_Left",
    "Arm_Right",
    "Leg_Right",
    "Total",
    "TBLH",
    "Trunk_Left",
    "Total_Left",
    "Trunk_Right",
    "Total_Right",
]

TOTAL_BODY_QUANTITIES = ["BMD", "BMC", "Area", "T_Score", "Z_Score", "Average_Height", "Average_Width"]

# Arms_Bone_Mass, Legs_Bone_Mass, ..., TBLH_Total_Mass
MASS_LABELS = [f"{region}_{tissue}_Mass" for tissue in MASS_TISSUES for region in BODY_COMPOSITION_REGIONS]

# Arms_Region_Percent_Fat, ..., TBLH_Tissue_Percent_Fat
PERCENT_LABELS = [f"{region}_{base}_Percent_Fat" for base in PERCENT_BASES for region in BODY_COMPOSITION_REGIONS]

# Head_BMD, ..., Total_Right_Average_Width
TOTAL_BODY_LABELS = [f"{region}_{quantity}" for quantity in TOTAL_BODY_QUANTITIES for region in TOTAL_BODY_REGIONS]

CORE_SCAN_COLUMNS = ["VAT_Mass_lbs", "VAT_Volume_in3"]


def mass_label(index: int) -> str:
    if index < len(MASS_LABELS):
        return MASS_LABELS[index]
    return f"Mass_{index}"


def percent_label(index: int) -> str:
    if index < len(PERCENT_LABELS):
        return PERCENT_LABELS[index]
    return f"Percent_{index}"


def total_body_label(index: int) -> str:
    if index < len(TOTAL_BODY_LABELS):
        return TOTAL_BODY_LABELS[index]
    return f"Value_{index}"


def measurement_columns(label: str) -> list[str]:
    """Expand a block label into its total/left/right/delta column names."""
    return [f"{label}_{suffix}" for suffix in MEASUREMENT_SUFFIXES]
