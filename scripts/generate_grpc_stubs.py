"""
Generates Python gRPC stubs from .proto files for the Milvus gRPC SDK.
"""
import subprocess
import sys
from pathlib import Path
import shutil
import re

def _relative_imports(content: str) -> str:
    # 'from milvus.proto import module'
    content = re.sub(
        r"from milvus\.proto import (\w+_pb2(?:_grpc)?)",
        r"from . import \1",
        content
    )
    # 'import milvus.proto.module as alias'
    content = re.sub(
        r"import milvus\.proto\.(\w+_pb2(?:_grpc)?)\s+as\s+(\w+)",
        r"from . import \1 as \2",
        content
    )
    return content

def post_process_generated_files(target_dir: Path):
    """
    Converts absolute imports in generated gRPC files to relative imports.
    e.g., 'from milvus.proto import common_pb2' becomes 'from . import common_pb2'
    """
    print(f"Post-processing files in {target_dir}...")
    for filepath in target_dir.glob("*.py"):
        print(f"  Processing {filepath.name}")
        filepath.write_text(_relative_imports(filepath.read_text()))

    for filepath in target_dir.glob("*.pyi"): # Also process .pyi files
        print(f"  Processing {filepath.name} (stub)")
        content = _relative_imports(filepath.read_text())
        # DataType.None is emitted as a module-level 'None: DataType', which is not valid Python.
        content = re.sub(r"^None: \w+\n", "", content, flags=re.MULTILINE)
        filepath.write_text(content)
    print("Post-processing complete.")

def main():
    """Main function to generate gRPC stubs."""
    # Assuming this script is in <repo>/scripts/
    project_root = Path(__file__).parent.parent.resolve()
    proto_source_dir = project_root / "proto" # Contains milvus/proto/*.proto

    # Output directory for generated stubs
    # This will create milvus_grpc_sdk/_grpc/milvus/proto/...
    output_dir = project_root / "milvus_grpc_sdk" / "_grpc"

    if not proto_source_dir.exists():
        print(f"Error: Proto source directory not found: {proto_source_dir}")
        sys.exit(1)

    # Ensure the base output directory exists, and clean it if it does
    if output_dir.exists():
        print(f"Cleaning existing output directory: {output_dir}")
        shutil.rmtree(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    (output_dir / "__init__.py").touch(exist_ok=True)

    try:
        import grpc_tools.protoc # type: ignore # noqa: F401
    except ImportError:
        print("Error: grpcio-tools is not installed. Please install it (`pip install -e \".[dev]\"`).")
        sys.exit(1)

    proto_files_to_compile = [
        str(p.relative_to(proto_source_dir)) for p in proto_source_dir.glob("milvus/proto/*.proto")
    ]

    if not proto_files_to_compile:
        print(f"No .proto files found in {proto_source_dir / 'milvus/proto'}")
        sys.exit(1)

    print(f"Found proto files: {proto_files_to_compile}")
    print(f"Proto include path: {proto_source_dir}")
    print(f"Output base directory: {output_dir}")

    protoc_command = [
        sys.executable,  # Use the current Python interpreter
        "-m", "grpc_tools.protoc",
        f"-I{proto_source_dir}",
        f"--python_out={output_dir}",
        f"--pyi_out={output_dir}",  # For .pyi stub files
        f"--grpc_python_out={output_dir}",
    ] + proto_files_to_compile

    print(f"Running command: {' '.join(protoc_command)}")

    try:
        process = subprocess.run(protoc_command, capture_output=True, text=True, check=True)
        print("gRPC stubs generated successfully.")
        if process.stdout:
            print("protoc stdout:\n", process.stdout)
        if process.stderr:
            print("protoc stderr:\n", process.stderr) # protoc often outputs to stderr even on success

        # The output structure is output_dir/milvus/proto/*.py,
        # so output_dir/milvus needs an __init__.py as well
        (output_dir / "milvus").mkdir(parents=True, exist_ok=True)
        (output_dir / "milvus" / "__init__.py").touch(exist_ok=True)

        proto_dir = output_dir / "milvus" / "proto"
        if not proto_dir.exists():
            print(f"Warning: Expected directory {proto_dir} not found after protoc. Skipping __init__.py and post-processing for it.")
        else:
            (proto_dir / "__init__.py").touch(exist_ok=True)
            print(f"Created __init__.py files in {output_dir / 'milvus'}")
            post_process_generated_files(proto_dir)

    except subprocess.CalledProcessError as e:
        print(f"Error generating gRPC stubs: {e}")
        print("stdout:\n", e.stdout)
        print("stderr:\n", e.stderr)
        sys.exit(1)
    except FileNotFoundError:
        print("Error: python or grpc_tools.protoc not found. Make sure Python and grpcio-tools are in your PATH.")
        sys.exit(1)

if __name__ == "__main__":
    main()
