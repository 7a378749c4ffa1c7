from dataclasses import replace

import pytest

from channel_export.config import CSV_COLUMNS
from channel_export.errors import ExportError
from channel_export.export import records_to_csv_bytes, records_to_dataframe, write_channels_to_csv


def read_lines(path):
    with open(path, encoding='utf-8') as f:
        return f.read().splitlines()


def test_write_two_records(tmp_path, sample_records):
    output = tmp_path / "youtube_channels.csv"

    write_channels_to_csv(sample_records, str(output))

    lines = read_lines(output)
    assert len(lines) == 3
    assert lines[0] == ",".join(CSV_COLUMNS)
    assert lines[1] == (
        "Cooking Daily,https://www.youtube.com/channel/UC_one,1500,3000,"
        "2024-05-02T10:00:00Z,2024-04-28T09:30:00Z,30,en,recipes;pasta,Нет,Не указано"
    )
    assert lines[2] == (
        "Кухня,https://www.youtube.com/channel/UC_two,2000,0,"
        "No videos found,No second last video found,0,unknown,No tags available,Да,Не указано"
    )


def test_missing_language_and_email_use_placeholders(tmp_path, sample_records):
    record = replace(sample_records[0], language=None, contact_email=None)
    output = tmp_path / "out.csv"

    write_channels_to_csv([record], str(output))

    fields = read_lines(output)[1].split(",")
    assert fields[7] == "Не указан"
    assert fields[10] == "Не указано"


def test_contact_email_written_when_present(sample_records):
    record = replace(sample_records[0], contact_email="chef@example.com")

    df = records_to_dataframe([record])

    assert df.iloc[0]["Почта"] == "chef@example.com"


def test_field_with_comma_is_quoted(tmp_path, sample_records):
    record = replace(sample_records[0], title="Cook, Eat, Repeat")
    output = tmp_path / "out.csv"

    write_channels_to_csv([record], str(output))

    assert read_lines(output)[1].startswith('"Cook, Eat, Repeat",https://')


def test_file_is_overwritten(tmp_path, sample_records):
    output = tmp_path / "out.csv"

    write_channels_to_csv(sample_records, str(output))
    write_channels_to_csv(sample_records[:1], str(output))

    assert len(read_lines(output)) == 2


def test_no_records_writes_header_only(tmp_path):
    output = tmp_path / "out.csv"

    write_channels_to_csv([], str(output))

    assert read_lines(output) == [",".join(CSV_COLUMNS)]


def test_dataframe_preserves_record_order(sample_records):
    df = records_to_dataframe(list(reversed(sample_records)))

    assert list(df.columns) == CSV_COLUMNS
    assert list(df["Ссылка"]) == [
        "https://www.youtube.com/channel/UC_two",
        "https://www.youtube.com/channel/UC_one",
    ]


def test_unwritable_path_raises_export_error(tmp_path, sample_records):
    output = tmp_path / "missing" / "out.csv"

    with pytest.raises(ExportError):
        write_channels_to_csv(sample_records, str(output))


def test_csv_bytes_match_written_file(tmp_path, sample_records):
    output = tmp_path / "out.csv"

    write_channels_to_csv(sample_records, str(output))

    assert records_to_csv_bytes(sample_records) == output.read_bytes()
