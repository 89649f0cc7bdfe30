"""
출력 설정 추천 데이터

구간 프래그먼트는 {value} 자리에 요청값을 그대로 표시
"""
from typing import Dict

from ..models import (
    FilamentFamily, InfillBucket, LayerHeightBucket, SettingsExtra, SpeedBucket
)
from .models import Fragment


# ============================================================
# 필라멘트 계열
# ============================================================
FILAMENT_FRAGMENTS: Dict[FilamentFamily, Fragment] = {
    FilamentFamily.PLA: Fragment(body="""**PLA Settings**:
- **Nozzle Temperature**: 200-220°C (start at 210°C)
- **Bed Temperature**: 50-60°C (optional, helps adhesion)
- **Print Speed**: 50-100 mm/s (60 mm/s recommended)
- **Cooling**: 100% after first layer
- **Retraction**: 0.5-1.0mm at 35mm/s
- **Layer Height**: 0.08-0.28mm (0.2mm standard)

**Tips**: PLA is forgiving and easy to print. Good bed adhesion with clean glass or PEI. Use brim for small footprints."""),

    FilamentFamily.PETG: Fragment(body="""**PETG Settings**:
- **Nozzle Temperature**: 230-250°C (start at 240°C)
- **Bed Temperature**: 70-90°C (80°C recommended)
- **Print Speed**: 40-60 mm/s (50 mm/s recommended)
- **Cooling**: 30-50% (less than PLA)
- **Retraction**: 1.0-2.0mm at 25mm/s
- **Layer Height**: 0.12-0.28mm (0.2mm standard)

**Tips**: PETG is stronger than PLA but more stringy. Reduce cooling, increase retraction. Clean bed with IPA. Slower is better."""),

    FilamentFamily.ABS: Fragment(body="""**ABS Settings**:
- **Nozzle Temperature**: 240-260°C (start at 250°C)
- **Bed Temperature**: 90-110°C (100°C recommended)
- **Chamber Temperature**: 40-60°C (if available)
- **Print Speed**: 40-60 mm/s
- **Cooling**: Minimal (0-20%, off for first layers)
- **Retraction**: 0.5-1.0mm at 40mm/s
- **Layer Height**: 0.12-0.3mm (0.2mm standard)

**Tips**: ABS requires enclosed printer and good ventilation. Warping is common - use brim or raft. Keep chamber warm."""),

    FilamentFamily.FLEXIBLE: Fragment(body="""**TPU/Flexible Filament Settings**:
- **Nozzle Temperature**: 210-230°C (start at 220°C)
- **Bed Temperature**: 40-60°C (optional)
- **Print Speed**: 15-30 mm/s (SLOW!)
- **Cooling**: 50-100%
- **Retraction**: 0.5-1.0mm at 15mm/s (or disable)
- **Layer Height**: 0.12-0.28mm (0.2mm standard)

**Tips**: Print VERY slowly. Reduce retraction or disable. Direct drive extruders work best. Increase extrusion multiplier slightly."""),

    FilamentFamily.GENERIC: Fragment(body="""**General Material Guidance**:
- Research specific temperatures for your material
- Start with manufacturer recommendations
- Perform temperature tower tests
- Adjust based on results
- Document successful settings for future use"""),
}


# ============================================================
# 레이어 높이 (mm)
# ============================================================
LAYER_HEIGHT_FRAGMENTS: Dict[LayerHeightBucket, Fragment] = {
    LayerHeightBucket.FINE: Fragment(parameterized=True, body="""**Fine/Detail Settings** ({value}mm):
- Excellent surface quality
- Visible layer lines minimal
- Print time: VERY LONG (3-4x standard)
- Best for: Miniatures, detailed parts, prototypes
- Speed: Reduce to 40-60% of normal
- First layer: Use same height or slightly larger"""),

    LayerHeightBucket.STANDARD: Fragment(parameterized=True, body="""**Standard/Balanced Settings** ({value}mm):
- Good balance of quality and speed
- Layer lines visible but acceptable
- Print time: Normal/standard
- Best for: General purpose, functional parts
- Speed: Normal/standard for material
- First layer: Can use same or 0.2mm"""),

    LayerHeightBucket.DRAFT: Fragment(parameterized=True, body="""**Fast/Draft Settings** ({value}mm):
- Faster prints, more visible layers
- Good for prototypes and test prints
- Print time: 30-50% faster than standard
- Best for: Rough drafts, internal parts, non-visible
- Speed: Can increase 10-20%
- First layer: Use 0.2mm for better adhesion"""),

    LayerHeightBucket.ROUGH: Fragment(parameterized=True, body="""**Very Fast/Rough Settings** ({value}mm):
- Very fast but rough surface
- Significant layer lines
- Print time: Very short
- Best for: Concept models, testing only
- Speed: Moderate (material dependent)
- Note: May reduce strength
- First layer: Use 0.2-0.25mm for adhesion"""),
}


# ============================================================
# 인필 (%)
# ============================================================
INFILL_FRAGMENTS: Dict[InfillBucket, Fragment] = {
    InfillBucket.VASE: Fragment(body="""**0% Infill (Vase Mode)**:
- Single wall, no infill, no top layers
- Very fast and material-efficient
- Use for: Decorative vases, lamp shades
- Requires: Vase mode enabled
- Note: Not structurally strong"""),

    InfillBucket.LOW: Fragment(parameterized=True, body="""**Low Infill ({value}%)**:
- Minimal internal structure
- Fast and material-efficient
- Use for: Decorative items, non-load bearing
- Strength: Low
- Pattern: Grid or Lines"""),

    InfillBucket.STANDARD: Fragment(parameterized=True, body="""**Standard Infill ({value}%)**:
- Good balance of strength and efficiency
- Most common for general prints
- Use for: Most functional parts, everyday objects
- Strength: Moderate
- Pattern: Grid, Cubic, or Gyroid"""),

    InfillBucket.HIGH: Fragment(parameterized=True, body="""**High Infill ({value}%)**:
- Strong internal structure
- Longer print time, more material
- Use for: Load-bearing parts, mechanical components
- Strength: High
- Pattern: Cubic, Gyroid, or Honeycomb"""),

    InfillBucket.SOLID: Fragment(parameterized=True, body="""**Very High/Solid Infill ({value}%)**:
- Very strong, nearly solid
- Long print time, high material use
- Use for: Maximum strength, threaded inserts, critical parts
- Strength: Very High
- Pattern: Cubic or Gyroid (or 100% for solid)
- Note: Diminishing returns above 80%"""),
}


# ============================================================
# 출력 속도 (mm/s)
# ============================================================
SPEED_FRAGMENTS: Dict[SpeedBucket, Fragment] = {
    SpeedBucket.SLOW: Fragment(parameterized=True, body="""**Slow/Precise Speed ({value} mm/s)**:
- High quality output
- Best layer adhesion
- Use for: Detailed parts, difficult materials
- Trade-off: Longer print times
- Good for: ABS, PETG, flexible filaments"""),

    SpeedBucket.STANDARD: Fragment(parameterized=True, body="""**Standard Speed ({value} mm/s)**:
- Balanced quality and speed
- Good for most materials
- Use for: General printing, PLA, PETG
- Most reliable setting
- Recommended for: Daily use"""),

    SpeedBucket.FAST: Fragment(parameterized=True, body="""**Fast Speed ({value} mm/s)**:
- Quick prints with some quality trade-off
- Requires good printer calibration
- Use for: PLA, simple geometries, drafts
- May need: Lower acceleration, higher temps
- Best for: Bambu Lab's high-speed printers"""),

    SpeedBucket.VERY_FAST: Fragment(parameterized=True, body="""**Very Fast Speed ({value} mm/s)**:
- Maximum speed, optimized for Bambu printers
- Requires: Excellent calibration
- Use for: PLA only (mostly)
- May need: Input shaping, pressure advance tuning
- Trade-off: Some quality loss, higher wear
- Best for: X1 Carbon with proper tuning"""),
}


# ============================================================
# 항상 포함
# ============================================================
SETTINGS_EXTRA_FRAGMENTS: Dict[SettingsExtra, Fragment] = {
    SettingsExtra.GENERAL_TIPS: Fragment(body="""**General Bambu Studio Tips**:

1. **Start Conservative**: Begin with standard settings and adjust
2. **One Change at a Time**: Test individual setting changes
3. **Use Presets**: Bambu Studio has excellent material presets
4. **Calibration First**: Ensure printer is properly calibrated
5. **Temperature Towers**: Test optimal temperatures for each material
6. **Document Success**: Save profiles of successful prints
7. **Material Matters**: Quality filament makes a big difference

**Bambu-Specific Features**:
- Use **Flow Calibration** for each material
- Enable **Adaptive Layer Height** for curved surfaces
- Use **Arch Move** algorithm for smoother curves
- Enable **Pressure Advance** for cleaner corners
- Consider **AMS** profiles for multi-color/material

**Quick Troubleshooting**:
- Poor adhesion: Increase bed temp, slow first layer
- Stringing: Increase retraction, lower temperature
- Layer shifting: Reduce speed, check belts
- Warping: Increase bed temp, use brim/raft, enclose printer"""),
}


SETTINGS_FRAGMENTS = {
    **FILAMENT_FRAGMENTS,
    **LAYER_HEIGHT_FRAGMENTS,
    **INFILL_FRAGMENTS,
    **SPEED_FRAGMENTS,
    **SETTINGS_EXTRA_FRAGMENTS,
}
