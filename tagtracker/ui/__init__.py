"""UI components."""
from .bar_chart import BarChart
from .sparkline import Sparkline
from .load_worker import LoadWorker
from .dashboard import DashboardWindow

__all__ = ['BarChart', 'Sparkline', 'LoadWorker', 'DashboardWindow']
