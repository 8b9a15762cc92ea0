"""Unit tests for use cases."""
from unittest.mock import Mock

from app.use_cases import ProcessArrivalsUseCase, PublishReportUseCase
from core.exceptions import FormatError, ResourceError
from zoo.intake import ZooIntake

HYENA_LINE = "2024-04-02, 5 years old male hyena, born in winter, brown color, 90 pounds, from Nairobi, Kenya"


class TestProcessArrivalsUseCase:
    """Tests for ProcessArrivalsUseCase."""

    def test_successful_processing(self):
        # Arrange
        use_case = ProcessArrivalsUseCase(ZooIntake({"hyena": ["Kiba"]}))

        # Act
        result = use_case.execute([HYENA_LINE])

        # Assert
        assert result.is_success()
        animals = result.unwrap()
        assert [a.unique_id for a in animals] == ["Hy01"]

    def test_domain_error_becomes_failure(self):
        # Arrange
        mock_intake = Mock()
        mock_intake.process_lines.side_effect = FormatError("Malformed arrival entry: x")
        use_case = ProcessArrivalsUseCase(mock_intake)

        # Act
        result = use_case.execute(["x"])

        # Assert
        assert result.is_failure()
        assert isinstance(result.error, FormatError)


class TestPublishReportUseCase:
    """Tests for PublishReportUseCase."""

    def test_writes_rendered_report(self):
        # Arrange
        mock_writer = Mock()
        mock_writer.write.return_value = "zooPopulation.txt"
        animals = ZooIntake({"hyena": ["Kiba"]}).process_lines([HYENA_LINE])
        use_case = PublishReportUseCase(mock_writer)

        # Act
        result = use_case.execute(animals)

        # Assert
        assert result.is_success()
        text = result.unwrap()
        assert text.startswith("Hyena Habitat (1)\n  - Hy01; Kiba;")
        mock_writer.write.assert_called_once_with(text)

    def test_exports_workbook_when_configured(self):
        mock_writer = Mock()
        mock_exporter = Mock()
        use_case = PublishReportUseCase(mock_writer, mock_exporter)

        result = use_case.execute([])

        assert result.is_success()
        mock_exporter.build.assert_called_once_with([])
        mock_exporter.save.assert_called_once_with(mock_exporter.build.return_value)

    def test_write_failure(self):
        mock_writer = Mock()
        mock_writer.write.side_effect = ResourceError("Unable to open report for writing: x")
        mock_exporter = Mock()
        use_case = PublishReportUseCase(mock_writer, mock_exporter)

        result = use_case.execute([])

        assert result.is_failure()
        assert isinstance(result.error, ResourceError)
        mock_exporter.save.assert_not_called()

    def test_workbook_build_failure_writes_nothing(self):
        # Arrange
        mock_writer = Mock()
        mock_exporter = Mock()
        mock_exporter.build.side_effect = ResourceError("Unable to write workbook x.xlsx")
        use_case = PublishReportUseCase(mock_writer, mock_exporter)

        # Act
        result = use_case.execute([])

        # Assert
        assert result.is_failure()
        assert isinstance(result.error, ResourceError)
        mock_writer.write.assert_not_called()
        mock_exporter.save.assert_not_called()
