"""Unit tests for the run report."""

from gridcards.config import get_error_sample_size
from gridcards.report import RunReport


class TestRunReport:
    """Tests for report counts and response shape."""

    def test_message(self):
        report = RunReport(week_id='wk-5', week_number=5, lineups_scored=12)
        assert report.message == 'Scored 12 lineups for week 5'

    def test_no_lineups_message(self):
        report = RunReport(week_id='wk-5', week_number=5, no_lineups=True)
        assert report.message == 'No lineups found for week 5'

    def test_response_without_errors(self):
        """Test the errors key is omitted when the run had none."""
        response = RunReport(week_id='wk-5', week_number=5).to_response()
        assert set(response) == {'success', 'message', 'stats'}
        assert response['stats']['errors'] == 0

    def test_error_sample_uses_config_default(self):
        """Test the sample size falls back to scoring_config.json."""
        report = RunReport(week_id='wk-5', week_number=5)
        for i in range(20):
            report.record_error(f'Lineup lu-{i}: failed')

        assert report.error_count == 20
        assert len(report.error_sample) == get_error_sample_size()
        assert report.error_sample[0] == 'Lineup lu-0: failed'

    def test_explicit_error_sample_size(self):
        report = RunReport(week_id='wk-5', week_number=5, error_sample_size=1)
        report.record_error('first')
        report.record_error('second')

        response = report.to_response()
        assert response['errors'] == ['first']
        assert response['stats']['errors'] == 2
