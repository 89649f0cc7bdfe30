"""
3D 프린터 문제 진단 데이터

카테고리 순서는 rules/troubleshoot.py 선언 순서를 따름
GENERAL은 매칭 0건일 때만 사용
"""
from typing import Dict

from ..models import IssueCategory
from .models import Fragment


TROUBLESHOOT_FRAGMENTS: Dict[IssueCategory, Fragment] = {
    # ============================================================
    # 1. First Layer / Bed Adhesion (첫 레이어 접착)
    # ============================================================
    IssueCategory.ADHESION: Fragment(body="""**First Layer / Bed Adhesion Issues**

**Common Causes & Solutions**:

1. **Bed Not Level or Too Far**:
   - Run automatic bed leveling in Bambu Studio
   - Check Z-offset adjustment
   - Ensure bed is clean and flat

2. **Bed Temperature Too Low**:
   - PLA: Increase to 60°C
   - PETG: Increase to 80-85°C
   - ABS: Increase to 100-110°C

3. **Print Speed Too Fast**:
   - Slow first layer to 20-30 mm/s
   - Increase first layer flow to 105-110%

4. **Bed Surface Issues**:
   - Clean with IPA (isopropyl alcohol)
   - Replace textured sheet if worn
   - Use glue stick for difficult materials

5. **Z-Offset Adjustment**:
   - In Bambu Studio: Printer Settings → Z-offset
   - Decrease by -0.05mm increments
   - First layer should slightly squish

**Bambu Studio Settings**:
- Enable "Brim" for small parts (5-10mm)
- Use "Raft" for warping materials
- Increase "First layer height" to 0.2-0.25mm
- Enable "Slow down for better layer adhesion\""""),

    # ============================================================
    # 2. Stringing / Oozing (스트링)
    # ============================================================
    IssueCategory.STRINGING: Fragment(body="""**Stringing / Oozing Issues**

**Causes & Solutions**:

1. **Temperature Too High**:
   - Reduce nozzle temp by 5-10°C
   - Print temperature tower to find optimal temp
   - Lower temps reduce oozing

2. **Retraction Settings**:
   - Increase retraction distance (0.5-2mm)
   - Increase retraction speed (25-45 mm/s)
   - For direct drive: 0.5-1mm
   - For Bowden: 4-6mm

3. **Travel Speed Too Slow**:
   - Increase travel speed to 150-200 mm/s
   - Enable "Avoid crossing perimeters"
   - Use "Z-hop on retraction" (0.2-0.4mm)

4. **Material Issues**:
   - Wet filament causes stringing
   - Dry filament before use
   - Store in dry box with desiccant

5. **Combing Settings**:
   - Enable "Only retract when crossing perimeters"
   - Use "Avoid crossing perimeters" when possible

**Bambu Studio Settings**:
- Print Settings → Retraction
- Enable "Wipe while retracting"
- Increase "Extra length on restart" if under-extruding after retract
- Test with small stringing test models"""),

    # ============================================================
    # 3. Layer Shifting (레이어 밀림)
    # ============================================================
    IssueCategory.LAYER_SHIFTING: Fragment(body="""**Layer Shifting Issues**

**Causes & Solutions**:

1. **Mechanical Issues**:
   - Check belt tension (should twang when plucked)
   - Inspect pulleys for damage
   - Ensure motors are secure
   - Check for obstructions in motion path

2. **Speed Too High**:
   - Reduce print speed by 30-50%
   - Lower acceleration settings
   - Reduce jerk/junction deviation

3. **Motor Current Too Low**:
   - May need firmware adjustment
   - Check for overheating stepper drivers
   - Ensure adequate cooling

4. **Electrical Issues**:
   - Check cable connections
   - Test motor drivers
   - Look for loose connections

5. **Mechanical Binding**:
   - Clean and lubricate linear rails
   - Check for debris in motion system
   - Ensure proper assembly

**Immediate Steps**:
1. Slow down print speed to 50 mm/s
2. Check all belt tensions
3. Verify all cables are secure
4. Clean motion system

**Bambu-Specific**:
- Run self-test diagnostics
- Check for firmware updates
- Verify CoreXY mechanism alignment"""),

    # ============================================================
    # 4. Warping (뒤틀림)
    # ============================================================
    IssueCategory.WARPING: Fragment(body="""**Warping / Corner Lifting Issues**

**Causes & Solutions**:

1. **Insufficient Bed Adhesion**:
   - Increase bed temperature
   - Clean bed thoroughly with IPA
   - Use glue stick or hairspray
   - Add brim or raft

2. **Cooling Too Aggressive**:
   - Reduce part cooling for first 5-10 layers
   - ABS: Minimal to no cooling
   - Disable fan for first layer

3. **Temperature Differential**:
   - Use enclosure to maintain ambient temp
   - Close doors if available
   - Avoid drafts and AC vents
   - Keep chamber warm (40-60°C for ABS)

4. **Part Geometry**:
   - Sharp corners warp more
   - Add "mouse ears" to corners
   - Use chamfered corners instead of sharp
   - Orient parts to minimize flat areas

5. **Material-Specific**:
   - ABS warps most: Use enclosure, high bed temp
   - PETG: Moderate warping, 80°C bed
   - PLA: Minimal warping, easiest

**Bambu Studio Settings**:
- Enable "Brim" with 8-15mm width
- Use "Raft" for severe warping
- Increase "Bed temperature" by 5-10°C
- Disable "Part cooling fan" for first 3-5 layers
- Consider "Draft shield" feature"""),

    # ============================================================
    # 5. Clogging / Under-Extrusion (노즐 막힘 / 압출 부족)
    # ============================================================
    IssueCategory.CLOGGING: Fragment(body="""**Clogging / Under-Extrusion Issues**

**Causes & Solutions**:

1. **Partial Clog**:
   - Perform cold pull cleaning
   - Heat to 180°C, push filament, cool to 90°C, pull
   - Repeat 2-3 times
   - Clean nozzle with needle

2. **Temperature Too Low**:
   - Increase nozzle temp by 5-10°C
   - Ensure temp matches material requirements
   - Check thermistor accuracy

3. **Filament Quality**:
   - Check filament diameter (should be 1.75mm ±0.03)
   - Wet filament causes steam and clogs
   - Try different brand/spool

4. **Extruder Issues**:
   - Check extruder tension
   - Look for ground filament (too tight)
   - Clean extruder gears
   - Verify proper filament path

5. **Nozzle Wear or Damage**:
   - Replace nozzle if old or damaged
   - Check for abrasive filament use
   - Inspect nozzle opening for deformation

**Bambu-Specific**:
- Run AMS calibration if using AMS
- Check filament path for tangles
- Verify filament sensor operation
- Clean extruder gears regularly

**Preventive Maintenance**:
- Dry filament before use
- Store in sealed bags with desiccant
- Replace nozzles every 500-1000 hours
- Regular cold pulls with cleaning filament"""),

    # ============================================================
    # 6. Print Quality (표면 품질)
    # ============================================================
    IssueCategory.PRINT_QUALITY: Fragment(body="""**Print Quality Issues**

**Common Quality Problems**:

1. **Ringing / Ghosting** (ripples after corners):
   - Reduce print speed (especially outer walls)
   - Lower acceleration and jerk
   - Enable Input Shaping (Bambu printers)
   - Increase part rigidity
   - Tighten loose components

2. **Z-Banding** (horizontal lines):
   - Check Z-axis binding
   - Lubricate lead screws
   - Verify consistent layer height
   - Check for Z-wobble

3. **Blobs / Zits**:
   - Tune retraction settings
   - Enable "Randomize seam position"
   - Use "Hide seam" option
   - Reduce coasting amount

4. **Over-extrusion**:
   - Reduce flow rate (95-98%)
   - Run flow calibration
   - Check filament diameter
   - Calibrate E-steps

5. **Poor Overhangs**:
   - Increase part cooling
   - Reduce print speed for overhangs
   - Add supports
   - Optimize part orientation

**Bambu Studio Calibration**:
- Run "Flow Rate Calibration"
- Enable "Pressure Advance"
- Use "Adaptive Layer Height"
- Enable "Smooth Speed Changes"
- Run "Vibration Compensation\""""),

    # ============================================================
    # 7. Software (슬라이서/소프트웨어)
    # ============================================================
    IssueCategory.SOFTWARE: Fragment(body="""**Bambu Studio Software Issues**

**Common Software Problems**:

1. **Crashes or Freezing**:
   - Update to latest Bambu Studio version
   - Check system requirements (8GB RAM minimum)
   - Reduce complex model polygon count
   - Clear cache and temp files
   - Reinstall if persistent

2. **Slicing Errors**:
   - Check model for errors (holes, non-manifold)
   - Use "Repair" function on model
   - Try different slicer engine settings
   - Simplify overly complex models

3. **Connection Issues** (to printer):
   - Verify network connection (WiFi/LAN)
   - Check printer IP address
   - Update printer firmware
   - Restart printer and Bambu Studio
   - Check firewall settings

4. **File Import Problems**:
   - Verify file format compatibility
   - Check file isn't corrupted
   - Try repairing model in mesh repair tool
   - Export from source in different format

5. **Settings Not Saving**:
   - Check file permissions
   - Run as administrator if needed
   - Verify profile isn't read-only
   - Check configuration file location

**Maintenance**:
- Regularly update Bambu Studio
- Keep printer firmware current
- Backup custom profiles
- Clear old project files periodically"""),

    # ============================================================
    # 폴백: 일반 진단 절차
    # ============================================================
    IssueCategory.GENERAL: Fragment(body="""**General Troubleshooting Approach**

**Systematic Problem Solving**:

1. **Identify the Problem**:
   - Document exactly what's wrong
   - Note when in the print it occurs
   - Check if it's consistent or random

2. **Recent Changes**:
   - New filament brand or color?
   - Settings changes?
   - Different model or geometry?
   - Software or firmware updates?

3. **Basic Checks**:
   - Bed leveled and clean
   - Nozzle not clogged
   - Correct temperatures
   - Filament dry and feeding properly
   - No mechanical obstructions

4. **Systematic Testing**:
   - Change ONE variable at a time
   - Use calibration prints
   - Document each change
   - Compare to known good prints

5. **Common Issues by Symptom**:
   - First layer problems → Bed adhesion, leveling, Z-offset
   - Stringing → Temperature, retraction, moisture
   - Layer shifting → Speed, mechanics, electrical
   - Warping → Bed temp, cooling, enclosure
   - Poor quality → Speed, calibration, wear

**Bambu-Specific Diagnostics**:
- Run built-in self-test
- Check error logs in Bambu Handy app
- Verify firmware version matches Bambu Studio
- Review print history for patterns
- Use Bambu Lab community forums

**Getting Help**:
- Post clear photos of the issue
- Include your settings (export profile)
- Mention material, printer model, software version
- Describe troubleshooting steps already tried
- Share project file if possible

**Useful Resources**:
- Bambu Lab Wiki: wiki.bambulab.com
- Community Forum: forum.bambulab.com
- Reddit: r/BambuLab
- Discord: Bambu Lab Official"""),
}
