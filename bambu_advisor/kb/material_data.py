"""
재료 선택 추천 데이터

추천 섹션 1개 + 비교표/결정 트리/프로파일 안내 (항상 포함)
"""
from typing import Dict

from ..models import MaterialChoice, MaterialReference
from .models import Fragment


MATERIAL_CHOICE_FRAGMENTS: Dict[MaterialChoice, Fragment] = {
    MaterialChoice.FLEXIBLE: Fragment(body="""**Recommended: TPU (Thermoplastic Polyurethane)**

**Why TPU**:
- Flexible and elastic
- Excellent impact resistance
- Good chemical resistance
- Durable and abrasion-resistant

**Properties**:
- Shore Hardness: 85A-95A (softer = more flexible)
- Strength: Moderate
- Heat Resistance: Up to 80°C
- UV Resistance: Good

**Print Settings**:
- Temperature: 210-230°C
- Speed: 15-30 mm/s (SLOW)
- Retraction: Minimal or disabled
- Direct drive recommended

**Best For**: Phone cases, gaskets, seals, wearables, shock absorbers, living hinges

**Alternatives**:
- **TPE**: More flexible, harder to print
- **Semiflex**: Easier to print, less flexible"""),

    MaterialChoice.HEAT_RESISTANT: Fragment(body="""**Recommended: ABS or ASA**

**ABS (Acrylonitrile Butadiene Styrene)**:
- Heat resistance: Up to 98°C
- Strong and impact-resistant
- Good for functional parts
- Requires enclosure
- Some warping issues

**ASA (Acrylonitrile Styrene Acrylate)** - Better Choice:
- Heat resistance: Up to 95°C
- UV resistant (ABS is not)
- Better outdoor performance
- Similar properties to ABS
- Also requires enclosure

**Print Settings**:
- Temperature: 240-260°C
- Bed: 100-110°C
- Enclosure: Required
- Cooling: Minimal

**Best For**: Automotive parts, outdoor fixtures, tool handles, functional prototypes, engineering parts

**Alternative**:
- **PETG**: Good heat resistance (80°C), easier to print, no enclosure needed"""),

    MaterialChoice.OUTDOOR: Fragment(body="""**Recommended: ASA (Acrylonitrile Styrene Acrylate)**

**Why ASA**:
- Excellent UV resistance
- Weather resistant
- Won't fade or degrade in sun
- Good mechanical properties
- Temperature resistant

**Properties**:
- Heat Resistance: 90-95°C
- UV Resistance: Excellent
- Strength: High
- Impact Resistance: Very good

**Print Settings**:
- Temperature: 240-260°C
- Bed: 100-110°C
- Enclosure: Highly recommended
- Cooling: Minimal

**Best For**: Outdoor fixtures, garden tools, automotive trim, architectural models, signage

**Alternatives**:
- **PETG**: Good UV resistance, easier to print
- **Nylon**: Excellent durability, but absorbs moisture
- **PC (Polycarbonate)**: Maximum strength and temp, harder to print"""),

    MaterialChoice.FOOD_SAFE: Fragment(body="""**Recommended: Food-Safe PLA or PETG**

**Important Safety Notes**:
- Material must be food-safe grade
- Nozzle must be stainless steel or brass (not lead)
- 3D prints have layer lines that harbor bacteria
- Best for single-use or dry food only
- Apply food-safe coating for long-term use

**Food-Safe PLA**:
- Easiest to print
- Biodegradable
- Non-toxic
- Max temp: 50°C (not for hot liquids)

**Food-Safe PETG**:
- FDA approved variants available
- More durable than PLA
- Better temperature resistance (70°C)
- Dishwasher safe (top rack)

**Print Settings**:
- Use new, clean nozzle
- Standard settings for material
- 100% infill or food-safe coating

**Best For**: Cookie cutters, measuring spoons, food molds, utensil handles, dry food storage

**Not Recommended**: ABS (toxic fumes), PLA for hot liquids, reusable without coating"""),

    MaterialChoice.FINE_DETAIL: Fragment(body="""**Recommended: PLA or Resin**

**For FDM (Bambu Studio) - PLA**:
- Excellent detail at small layer heights
- Minimal shrinkage
- Easy to print with fine settings
- Good surface finish
- Wide color selection

**Print Settings for Detail**:
- Layer Height: 0.08-0.12mm
- Speed: Slow (40-60 mm/s)
- Temperature: 200-210°C
- Cooling: 100%

**Special PLA Variants**:
- **PLA+**: Stronger, similar detail
- **Silk PLA**: Beautiful surface finish
- **Matte PLA**: Smooth, non-reflective

**Best For**: Miniatures, detailed models, figurines, artistic pieces, prototypes

**If Maximum Detail Needed**:
- Consider resin printing instead of FDM
- Resin offers 10x better detail
- But Bambu Studio is for FDM only"""),

    MaterialChoice.STRENGTH: Fragment(body="""**Recommended: PETG or Nylon**

**PETG (Polyethylene Terephthalate Glycol)** - Best All-Around:
- Strong and impact-resistant
- Good chemical resistance
- Moderate temperature resistance (80°C)
- Easy to print (easier than ABS)
- Food-safe options available
- No enclosure needed

**Print Settings**:
- Temperature: 230-250°C
- Bed: 75-85°C
- Speed: 40-60 mm/s
- Cooling: 30-50%

**Nylon (Polyamide)** - Maximum Strength:
- Exceptional strength and durability
- Excellent wear resistance
- Good chemical resistance
- Flexible without breaking
- Requires drying before use

**Print Settings**:
- Temperature: 240-260°C
- Bed: 70-80°C
- Enclosure: Recommended
- Must be dried (moisture absorbs quickly)

**Best For**:
- PETG: Mechanical parts, brackets, enclosures, functional prototypes
- Nylon: Gears, bearings, hinges, high-wear parts, tools

**Alternatives**:
- **PLA+/PLA Pro**: Easier than PETG, decent strength
- **PC (Polycarbonate)**: Maximum strength, very difficult to print
- **Carbon Fiber Composites**: Ultimate strength, requires hardened nozzle"""),

    MaterialChoice.GENERAL_PURPOSE: Fragment(body="""**Recommended: PLA (Polylactic Acid)**

**Why PLA for General Use**:
- Easiest to print
- Wide color selection
- Good detail and surface finish
- No odor, biodegradable
- No enclosure needed
- Most affordable

**Properties**:
- Strength: Moderate (good for non-functional)
- Heat Resistance: Low (60°C)
- Detail: Excellent
- Ease of Printing: Easiest

**Print Settings**:
- Temperature: 200-220°C
- Bed: 50-60°C (optional)
- Speed: 50-100 mm/s
- Cooling: 100% (after first layer)

**PLA Variants**:
- **Standard PLA**: General purpose, all colors
- **PLA+/Pro**: Stronger, less brittle
- **Silk PLA**: Shiny, metallic-like finish
- **Matte PLA**: Professional, non-glossy
- **Wood PLA**: Wood-like appearance and texture
- **Glow PLA**: Glows in the dark
- **Color-changing**: Temperature-sensitive

**Best For**: Decorative items, prototypes, art projects, figures, toys, models, learning"""),
}


MATERIAL_REFERENCE_FRAGMENTS: Dict[MaterialReference, Fragment] = {
    MaterialReference.COMPARISON_TABLE: Fragment(body="""**Material Comparison Quick Reference**:

| Material | Strength | Heat Res | Ease | Best Use Case |
|----------|----------|----------|------|---------------|
| **PLA** | ⭐⭐⭐ | ⭐⭐ | ⭐⭐⭐⭐⭐ | Decorative, prototypes |
| **PLA+** | ⭐⭐⭐⭐ | ⭐⭐ | ⭐⭐⭐⭐⭐ | General functional parts |
| **PETG** | ⭐⭐⭐⭐ | ⭐⭐⭐⭐ | ⭐⭐⭐⭐ | Functional, mechanical |
| **ABS** | ⭐⭐⭐⭐ | ⭐⭐⭐⭐⭐ | ⭐⭐⭐ | Heat resistant, automotive |
| **ASA** | ⭐⭐⭐⭐ | ⭐⭐⭐⭐⭐ | ⭐⭐⭐ | Outdoor, UV resistant |
| **TPU** | ⭐⭐⭐ | ⭐⭐⭐ | ⭐⭐ | Flexible, shock absorbing |
| **Nylon** | ⭐⭐⭐⭐⭐ | ⭐⭐⭐⭐ | ⭐⭐ | High wear, maximum strength |
| **PC** | ⭐⭐⭐⭐⭐ | ⭐⭐⭐⭐⭐ | ⭐ | Engineering, extreme duty |"""),

    MaterialReference.DECISION_TREE: Fragment(body="""**Decision Tree**:
1. Flexible needed? → **TPU**
2. Outdoor use? → **ASA**
3. High temperature? → **ABS/ASA**
4. Maximum strength? → **Nylon** or **PC**
5. Food contact? → **Food-safe PLA/PETG**
6. Fine detail? → **PLA**
7. Functional part? → **PETG**
8. General/decorative? → **PLA**"""),

    MaterialReference.STUDIO_PROFILES: Fragment(body="""**Bambu Studio Material Profiles**:
- Bambu Studio includes optimized profiles for all common materials
- Select material in "Filament Settings"
- Profiles include tested temperatures, speeds, and cooling
- Can customize and save your own profiles"""),
}


MATERIAL_FRAGMENTS = {
    **MATERIAL_CHOICE_FRAGMENTS,
    **MATERIAL_REFERENCE_FRAGMENTS,
}
