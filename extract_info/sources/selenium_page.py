"""Page source backed by Selenium WebDriver (Chrome)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.chrome.service import Service
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver

from ..errors import TargetUnreachableError
from ..models import PageSnapshot
from .base import LINK_SELECTOR, BrowserPageSource, BrowserSourceConfig

LOGGER = logging.getLogger(__name__)


@dataclass
class SeleniumSourceConfig(BrowserSourceConfig):
    """Configuration parameters for :class:`SeleniumPageSource`."""

    driver_path: Optional[str] = None
    user_data_dir: Optional[str] = None
    profile_directory: Optional[str] = None
    binary_location: Optional[str] = None


class SeleniumPageSource(BrowserPageSource):
    """Drives Chrome through Selenium and reads the rendered page.

    The driver is created lazily and reused across snapshots until
    :meth:`close` is called.
    """

    name = "selenium"

    def __init__(
        self,
        config: Optional[SeleniumSourceConfig | Dict[str, Any]] = None,
        *,
        driver_factory: Optional[Callable[[], WebDriver]] = None,
    ) -> None:
        if isinstance(config, dict):
            resolved_config = SeleniumSourceConfig(**config)
        else:
            resolved_config = config or SeleniumSourceConfig()
        super().__init__(config=resolved_config)
        self._driver: Optional[WebDriver] = None
        self._driver_factory = driver_factory

    def _ensure_driver(self) -> WebDriver:
        if self._driver is None:
            if self._driver_factory is not None:
                self._driver = self._driver_factory()
            else:
                options = self._build_options()
                service = Service(executable_path=self.config.driver_path) if self.config.driver_path else Service()
                self._driver = webdriver.Chrome(service=service, options=options)
            self._driver.set_page_load_timeout(max(self.config.navigation_timeout, 1.0))
        return self._driver

    def _build_options(self) -> ChromeOptions:
        options = ChromeOptions()
        if self.config.headless:
            options.add_argument("--headless=new")
            options.add_argument("--disable-gpu")
        options.add_argument("--no-sandbox")
        options.add_argument("--disable-dev-shm-usage")
        if self.config.user_data_dir:
            options.add_argument(f"--user-data-dir={self.config.user_data_dir}")
        if self.config.profile_directory:
            options.add_argument(f"--profile-directory={self.config.profile_directory}")
        if self.config.binary_location:
            options.binary_location = self.config.binary_location
        options.add_argument("--window-size=1920,1080")
        return options

    def close(self) -> None:
        if self._driver is not None:
            LOGGER.debug("Closing Selenium driver")
            self._driver.quit()
            self._driver = None

    def snapshot(self, target: str) -> PageSnapshot:
        try:
            driver = self._ensure_driver()
            LOGGER.info("Navigating to %s", target)
            driver.get(target)
            self._apply_settle_delay()
            return self.read_page(driver)
        except WebDriverException as exc:
            raise TargetUnreachableError(target, exc.msg or exc.__class__.__name__) from exc

    @staticmethod
    def read_page(driver: WebDriver) -> PageSnapshot:
        """Capture the page currently loaded in *driver*."""

        links = [element.get_dom_attribute("href") for element in driver.find_elements(By.CSS_SELECTOR, LINK_SELECTOR)]
        bodies = driver.find_elements(By.TAG_NAME, "body")
        text = bodies[0].text if bodies else ""
        return PageSnapshot.build(url=driver.current_url, title=driver.title, links=links, text=text)
