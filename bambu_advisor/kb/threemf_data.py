"""
3MF 프로젝트 아카이브 안내 데이터

"all"은 개별 항목을 조합하지 않은 요약본 (독립 카테고리)
"""
from typing import Dict

from ..models import ThreeMFTopic
from .models import Fragment


THREEMF_FRAGMENTS: Dict[ThreeMFTopic, Fragment] = {
    ThreeMFTopic.STRUCTURE: Fragment(body="""**3MF File Structure in Bambu Studio**

3MF files are ZIP archives with a specific structure:

```
my-project.3mf (ZIP archive)
├── [Content_Types].xml          # MIME types for contents
├── _rels/                        # Relationship definitions
│   └── .rels                     # Root relationships
├── 3D/                           # 3D model data
│   ├── 3dmodel.model             # Main model file (XML)
│   └── Metadata/
│       ├── thumbnail.png         # Preview image
│       └── model_settings.xml    # Print settings
├── Metadata/                     # Project metadata
│   ├── Slic3r_PE.config          # Slicer configuration
│   └── Slic3r_PE_model.config    # Model-specific settings
└── Bambu/                        # Bambu-specific data
    ├── project_settings.json     # Project settings
    └── auxiliary.xml             # Auxiliary data
```

**Key Components**:

1. **3dmodel.model**: XML file with mesh geometry, vertices, triangles
2. **Metadata**: Print settings, speeds, temperatures, materials
3. **Thumbnails**: Preview images for file browsers and printer screens
4. **Relationships**: Links between files and resources

**Bambu Studio Extensions**:
- Uses 3MF Production Extension for faster I/O
- Splits large models across multiple files
- Includes Bambu-specific settings and profiles

**Extraction**: You can rename .3mf to .zip and extract contents for inspection or programmatic access."""),

    ThreeMFTopic.COMPATIBILITY: Fragment(body="""**3MF Compatibility in Bambu Studio**

**Bambu Studio 3MF Variants**:

1. **Standard Bambu 3MF** (Default)
   - Uses 3MF Production Extension
   - Faster save/load times
   - Optimized for large projects
   - **May not open in other slicers** (Cura, PrusaSlicer)

2. **Generic 3MF** (Export Option)
   - Uses 3MF Core Specification
   - Compatible with most slicers
   - Slightly slower to load
   - Universal compatibility

3. **.gcode.3mf** (Ready-to-Print)
   - Contains pre-sliced G-code
   - Ready for printing immediately
   - Printer-specific
   - Cannot be re-sliced

**Compatibility Issues**:

**Problem**: Other slicers can't open Bambu 3MF files
- **Cause**: Bambu uses Production Extension by default
- **Solution**: Export as "Generic 3MF" or "Export to 3MF (Core Spec)"

**Cross-Slicer Workflow**:
1. In Bambu Studio: File → Export → Export to 3MF (Core Spec)
2. Now compatible with Cura, PrusaSlicer, Simplify3D
3. May lose some Bambu-specific settings

**Importing from Other Slicers**:
- Most 3MF files from other slicers import fine
- Some settings may need adjustment
- Material profiles might not match
- Check speeds and temperatures after import

**Best Practices**:
- Use standard Bambu 3MF for your own projects
- Export Generic 3MF when sharing with users of other slicers
- Keep both versions if cross-compatibility is needed
- Test imports from other slicers before important prints"""),

    ThreeMFTopic.METADATA: Fragment(body="""**3MF Metadata in Bambu Studio**

3MF files can contain extensive metadata beyond geometry:

**Embedded Information**:

1. **Print Settings**
   - Layer heights (initial, standard, sparse)
   - Print speeds (outer wall, inner wall, infill, travel)
   - Temperatures (nozzle, bed, chamber)
   - Cooling settings (fan speeds by layer)

2. **Material Profiles**
   - Filament type (PLA, PETG, ABS, etc.)
   - Color information
   - Brand and product details
   - Material-specific settings

3. **Model Properties**
   - Model scale and orientation
   - Support structures configuration
   - Per-model print settings overrides
   - Object arrangement on plate

4. **Project Configuration**
   - Printer profile (X1, P1P, A1, etc.)
   - Plate configuration (build volume)
   - Multi-plate projects
   - Assembly instructions

5. **Visual Elements**
   - Thumbnail images (for file browsers)
   - Layer preview images
   - Print time and material estimates
   - Slicing timestamp

**Accessing Metadata**:
- Bambu Studio UI: Right-click → Properties
- Command line: Rename to .zip and extract
- Programmatic: Parse XML/JSON files inside

**Using Metadata**:
- Quick project identification
- Reproducing successful prints
- Sharing complete print profiles
- Archiving print configurations
- Quality control and documentation

**Privacy Note**: 3MF files may contain user information, machine IDs, and timestamps. Review before sharing publicly."""),

    ThreeMFTopic.OVERVIEW: Fragment(body="""**Complete 3MF Guide for Bambu Studio**

[See individual aspects: structure, compatibility, and metadata for full details]

**Quick Reference**:

**What is 3MF?**
ZIP-based archive containing 3D geometry, print settings, metadata, and resources.

**Bambu Studio Versions**:
- Standard: Fast, uses Production Extension (Bambu-only)
- Generic: Core Spec, compatible with all slicers
- .gcode.3mf: Ready-to-print with embedded G-code

**File Structure**:
- 3D/3dmodel.model: Geometry (XML mesh)
- Metadata/: Settings and configurations
- Thumbnails: Preview images
- Relationships: File connections

**Compatibility**:
- Bambu to Other Slicers: Export as "Generic 3MF"
- Other Slicers to Bambu: Usually works, check settings
- Within Bambu: Full compatibility

**Best Practices**:
1. Use 3MF as primary project format (not STL)
2. Save complete projects with all settings
3. Export Generic 3MF for sharing
4. Keep source files separate from print-ready exports
5. Use descriptive filenames with version numbers
6. Back up important projects with all metadata

**When to Use Each Format**:
- **3MF**: All project work, archiving, sharing within Bambu
- **Generic 3MF**: Sharing with other slicer users
- **.gcode.3mf**: Ready-to-print, send to printer
- **STL**: Only for basic geometry exchange

**Pro Tips**:
- 3MF files are ZIP archives - can extract and inspect
- Metadata includes all settings for perfect reproduction
- Thumbnails help organize your project library
- Production Extension = faster but less compatible"""),

    ThreeMFTopic.UNKNOWN: Fragment(body="Information not available for the specified aspect."),
}
