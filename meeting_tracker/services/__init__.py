"""Service layer of the meeting tracker."""
