"""
파일 포맷 안내 데이터
"""
from typing import Dict

from ..models import FormatTopic
from .models import Fragment


FORMAT_FRAGMENTS: Dict[FormatTopic, Fragment] = {
    FormatTopic.STL: Fragment(body="""**STL (STereoLithography) File Format**

**Purpose**: Represents 3D geometry as a triangular mesh - the most basic and universal 3D model format.

**Key Characteristics**:
- Contains ONLY geometry data (the shape of your model)
- No color, texture, or material information
- No print settings or metadata
- Binary or ASCII format

**When to Use in Bambu Studio**:
- Importing basic 3D models for slicing
- Maximum compatibility with other software
- When you only need the geometry
- Exporting models from CAD software

**Limitations**:
- No embedded print settings
- Cannot store multi-material or multi-color information
- Larger file sizes for complex models compared to 3MF
- No project management features

**Best Practice**: Use STL for simple imports, but switch to 3MF for saving projects with settings."""),

    FormatTopic.THREEMF: Fragment(body="""**3MF (3D Manufacturing Format) File Format**

**Purpose**: Modern, comprehensive format for 3D printing that includes geometry, settings, and metadata in a ZIP-based container.

**Key Characteristics**:
- Contains geometry, print settings, colors, materials
- Compressed ZIP archive format
- Industry standard supported by major slicers
- Can include thumbnails and previews
- Supports multi-material and multi-color prints

**Bambu Studio Variants**:
1. **Standard 3MF**: Full project files with settings
2. **.gcode.3mf**: Ready-to-print files with embedded G-code
3. **Generic 3MF**: Compatible with other slicers (Core Spec)
4. **Bambu 3MF**: Uses 3MF Production Extension for faster loading

**When to Use in Bambu Studio**:
- Saving complete projects with all settings
- Sharing projects with others
- Multi-color or multi-material prints
- When you need to preserve layer heights, speeds, etc.
- Archiving print-ready files

**Best Practice**: Use 3MF as your primary project format. Export as "Generic 3MF" for compatibility with other slicers."""),

    FormatTopic.GCODE: Fragment(body="""**G-code File Format**

**Purpose**: Machine instruction language that tells the 3D printer exactly how to move, heat, and extrude to create your object.

**Key Characteristics**:
- Plain text file with commands (G0, G1, M104, etc.)
- Printer-specific (tailored for your exact printer model)
- Contains temperatures, speeds, movements, extrusion amounts
- Human-readable but complex
- Ready-to-print format

**Bambu Studio Usage**:
- Generated by slicing STL or 3MF files
- Often embedded in .gcode.3mf files
- Can be exported as standalone .gcode files
- Includes printer-specific optimizations

**When to Use**:
- Sending directly to printer
- Final output after slicing
- When you don't need to modify the model
- Quick prints without re-slicing

**Limitations**:
- Cannot be re-sliced or modified
- Printer-specific (won't work on different models)
- No geometry data (can't view the original model)
- Settings are "baked in"

**Best Practice**: Keep the source 3MF files for future modifications; G-code is your final output format."""),

    FormatTopic.OBJ: Fragment(body="""**OBJ (Wavefront Object) File Format**

**Purpose**: Standard 3D geometry format that can include color and texture information.

**Key Characteristics**:
- Contains 3D geometry (vertices, faces)
- Can include vertex colors and textures
- Plain text format (human-readable)
- Widely supported in 3D modeling software
- Often paired with .mtl (material) files

**When to Use in Bambu Studio**:
- Importing colored models from 3D modeling software
- Models with texture information
- When STL doesn't preserve needed color data
- Converting from graphics/animation software

**Advantages over STL**:
- Supports vertex colors
- Can reference texture files
- Better for multi-color models

**Limitations**:
- Larger file sizes than STL
- No print settings or metadata
- Less common in 3D printing than STL

**Best Practice**: Use OBJ when importing models with color data, then save as 3MF for your print project."""),

    FormatTopic.STEP: Fragment(body="""**STEP (Standard for the Exchange of Product Data) File Format**

**Purpose**: CAD-native format that preserves precise engineering geometry and assembly information.

**Key Characteristics**:
- Preserves exact CAD geometry (curves, surfaces, assemblies)
- Contains precise mathematical representations
- Maintains tolerance and measurement data
- Can include assembly relationships
- Industry standard for engineering (ISO 10303)

**When to Use in Bambu Studio**:
- Importing from CAD software (SolidWorks, Fusion 360, etc.)
- Engineering and functional parts requiring precision
- Parts with exact dimensions and tolerances
- Complex assemblies that need to be printed separately

**Advantages**:
- More accurate than STL mesh approximations
- Preserves design intent
- Better for technical/engineering parts
- Can maintain assembly structure

**Bambu Studio Support**:
- Native STEP import support
- Converts to mesh for slicing
- Preserves better detail than STL conversion
- Good for high-precision parts

**Best Practice**: Use STEP for importing CAD models; it provides better accuracy than converting to STL first."""),

    FormatTopic.UNKNOWN: Fragment(body="Format information not available for the specified format."),
}
