"""
Consumption input handling.

Reads uploaded files into `CsvConsumption` or `ImageConsumption` and provides
the built-in sample data used at startup and after a failed read.
"""

import base64
import io

import pandas as pd

from epower.errors import FileReadError, UnsupportedFileError
from epower.models import CsvConsumption, ImageConsumption

SAMPLE_FILE_NAME = "sample-data.csv"

SAMPLE_CSV = """Hour,Consumption(kWh)
0,0.5
1,0.4
2,0.4
3,0.3
4,0.3
5,0.8
6,1.5
7,2.5
8,2.2
9,1.8
10,1.5
11,1.4
12,1.6
13,1.5
14,1.7
15,1.9
16,2.8
17,3.5
18,4.2
19,3.8
20,3.2
21,2.5
22,1.5
23,0.8
"""

# Extensions offered by the file picker
ACCEPTED_TYPES = ["csv", "png", "jpg", "jpeg", "webp"]


class ConsumptionLoader:
    """
    Handles reading of consumption data.

    Methods:
    - sample: Returns the built-in hourly sample as CSV consumption.
    - classify: Decides whether an upload is an image, a CSV or unsupported.
    - read: Reads an uploaded file into a consumption input.
    - to_frame: Parses CSV consumption into a DataFrame for previewing.
    """

    @staticmethod
    def sample():
        return CsvConsumption(SAMPLE_CSV)

    @staticmethod
    def classify(file_name, mime_type):
        """Return "image", "csv" or None. An image MIME type wins over a .csv name."""
        mime_type = mime_type or ""
        if mime_type.startswith("image/"):
            return "image"
        if mime_type == "text/csv" or (file_name or "").lower().endswith(".csv"):
            return "csv"
        return None

    @staticmethod
    def read(uploaded):
        """Read a Streamlit UploadedFile (or anything with name, type and getvalue())."""
        kind = ConsumptionLoader.classify(uploaded.name, uploaded.type)
        if kind is None:
            raise UnsupportedFileError(
                f"Unsupported file type {uploaded.type!r} for {uploaded.name!r}"
            )

        try:
            payload = uploaded.getvalue()
        except OSError as e:
            raise FileReadError(f"Could not read {uploaded.name!r}: {e}") from e

        if kind == "image":
            if not payload:
                raise FileReadError(f"{uploaded.name!r} is empty")
            return ImageConsumption(
                base64_data=base64.b64encode(payload).decode("ascii"),
                mime_type=uploaded.type,
            )

        try:
            text = payload.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise FileReadError(f"{uploaded.name!r} is not UTF-8 text") from e
        return CsvConsumption(text)

    @staticmethod
    def to_frame(consumption):
        """Parse CSV consumption for the preview chart. Raises ValueError on bad CSV."""
        try:
            df = pd.read_csv(io.StringIO(consumption.text))
        except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise ValueError(f"Unreadable CSV: {e}") from e
        df.columns = [str(column).strip() for column in df.columns]
        return df
