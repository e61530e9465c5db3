from gitgraphed.extractor import RawDay
from gitgraphed.extractor import extract_day_fragments
from gitgraphed.extractor import extract_total_contributions


CALENDAR_HTML = """
<h2 class="f4 text-normal mb-2">
  1,042 contributions in the last year
</h2>
<table class="ContributionCalendar-grid">
  <tr>
    <td tabindex="0" data-ix="0" aria-selected="false" style="width: 10px"
        data-date="2024-01-07" id="contribution-day-component-0-0"
        data-level="0" role="gridcell" class="ContributionCalendar-day"></td>
    <td data-date="2024-01-08" data-level="2" class="ContributionCalendar-day">3 contributions</td>
  </tr>
</table>
"""


def test_extract_total_takes_first_number_before_phrase() -> None:
    html = "<p>42 contributions in the last year</p><p>7 contributions in the last year</p>"

    assert extract_total_contributions(html) == 42


def test_extract_total_returns_zero_when_phrase_missing() -> None:
    assert extract_total_contributions("<html><body>Not found</body></html>") == 0


def test_extract_day_fragments_tolerates_unrelated_attributes() -> None:
    fragments = extract_day_fragments(CALENDAR_HTML)

    assert fragments == [
        RawDay(date="2024-01-07", level="0", text=""),
        RawDay(date="2024-01-08", level="2", text="3 contributions"),
    ]


def test_extract_day_fragments_ignores_level_before_date() -> None:
    html = '<td data-level="2" data-date="2024-01-08">3 contributions</td>'

    assert extract_day_fragments(html) == []


def test_extract_day_fragments_returns_empty_list_for_unrelated_page() -> None:
    assert extract_day_fragments("<html><body><td>cell</td></body></html>") == []


def test_extract_total_ignores_non_ascii_digits() -> None:
    html = "<p>٤٢ contributions in the last year</p>"

    assert extract_total_contributions(html) == 0
